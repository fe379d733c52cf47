from typing import List, Optional, Tuple

from flask import current_app
from sqlalchemy.exc import IntegrityError

from leaderboard import db
from leaderboard.errors import AlreadyExists, Forbidden, InvalidName, InvalidScore, NoSuchGame, Unauthorized
from leaderboard.models import Game, Score
from .authority import AuthorityLevel, check_authority, resolve_authority
from .keys import GameKeys

SCORE_MIN = -2 ** 31
SCORE_MAX = 2 ** 31 - 1


def find_game(game_name: str) -> Optional[Game]:
    return Game.query.filter_by(name=game_name).first()


def _authorized_game(game_name: str, presented_key: Optional[str], required: AuthorityLevel) -> Game:
    """Look up a live game and make sure the key grants `required` on it."""
    game = find_game(game_name)
    if game is None:
        raise NoSuchGame(game_name)
    level = resolve_authority(game, presented_key)
    try:
        check_authority(level, required)
    except (Unauthorized, Forbidden) as exc:
        current_app.logger.warning(
            f"[denied] game={game.id} have={level.name} need={required.name} reason={type(exc).__name__}"
        )
        raise
    return game


def game_info(game_name: str) -> Game:
    game = find_game(game_name)
    if game is None:
        raise NoSuchGame(game_name)
    return game


def create_game(game_name) -> Tuple[int, GameKeys]:
    """Register a new game and issue its key triple.

    The keys are returned here and never again. The existence check is
    only a fast path; the unique constraint on the name decides races.
    """
    if not isinstance(game_name, str) or not game_name:
        raise InvalidName()
    # Names are a single URL path segment in every game route
    if '/' in game_name:
        raise InvalidName('Game name must not contain "/"')
    if find_game(game_name) is not None:
        raise AlreadyExists(game_name)

    keys = GameKeys.generate()
    game = Game(
        name=game_name,
        read_key=keys.read_key,
        write_key=keys.write_key,
        admin_key=keys.admin_key,
    )
    db.session.add(game)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        current_app.logger.info(f"[create] lost race for name={game_name!r}")
        raise AlreadyExists(game_name)
    current_app.logger.info(f"[create] game={game.id} name={game_name!r}")
    return game.id, keys


def delete_game(game_name: str, presented_key: Optional[str]) -> int:
    """Remove a game and all of its scores; returns how many scores went with it."""
    game = _authorized_game(game_name, presented_key, AuthorityLevel.ADMIN)
    game_id = game.id
    try:
        removed = Score.query.filter_by(game_id=game_id).delete(synchronize_session=False)
        db.session.delete(game)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"[delete] game={game_id} name={game_name!r} scores_removed={removed}")
    return removed


def _validate_score(score, extra_info) -> None:
    # bool is an int subclass but never a score
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScore('score must be an integer')
    if not SCORE_MIN <= score <= SCORE_MAX:
        raise InvalidScore('score must fit in a signed 32-bit integer')
    if extra_info is not None and not isinstance(extra_info, str):
        raise InvalidScore('extra_info must be a string or null')


def append_score(game_name: str, presented_key: Optional[str], score, extra_info=None) -> Score:
    game = _authorized_game(game_name, presented_key, AuthorityLevel.WRITE)
    _validate_score(score, extra_info)
    record = Score(game_id=game.id, score=score, extra_info=extra_info)
    db.session.add(record)
    db.session.commit()
    current_app.logger.info(f"[score] game={game.id} score={score}")
    return record


def list_scores(game_name: str, presented_key: Optional[str]) -> List[Score]:
    """Scores of a game, highest first; equal scores in the order they were added."""
    game = _authorized_game(game_name, presented_key, AuthorityLevel.READ)
    return (
        Score.query.filter_by(game_id=game.id)
        .order_by(Score.score.desc(), Score.id.asc())
        .all()
    )
