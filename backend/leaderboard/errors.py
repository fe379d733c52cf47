"""Errors raised by the leaderboard services.

Each error carries the HTTP status the API answers with, so the
blueprints only need a single handler to render them.
"""


class LeaderboardError(Exception):
    status_code = 500

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__

    def to_dict(self):
        return {'error': self.message}


class InvalidName(LeaderboardError):
    """Game name must be a non-empty string"""
    status_code = 400


class InvalidScore(LeaderboardError):
    """Score must be a 32-bit integer with optional string extra_info"""
    status_code = 400


class Unauthorized(LeaderboardError):
    """A valid key is required"""
    status_code = 401


class Forbidden(LeaderboardError):
    """Key does not grant enough authority"""
    status_code = 403


class NoSuchGame(LeaderboardError):
    """Game not found"""
    status_code = 404

    def __init__(self, game_name):
        super().__init__(f'No game named {game_name!r} exists')
        self.game_name = game_name


class AlreadyExists(LeaderboardError):
    """Game already exists"""
    status_code = 409

    def __init__(self, game_name):
        super().__init__(f'A game named {game_name!r} already exists')
        self.game_name = game_name
