import enum
import hmac
from typing import Optional

from leaderboard.errors import Forbidden, Unauthorized
from leaderboard.models import Game


class AuthorityLevel(enum.IntEnum):
    UNAUTHORIZED = 0
    READ = 1
    WRITE = 2
    ADMIN = 3


def _matches(presented: str, stored: Optional[str]) -> bool:
    if not stored:
        return False
    return hmac.compare_digest(presented.encode('utf-8'), stored.encode('utf-8'))


def resolve_authority(game: Game, presented_key: Optional[str]) -> AuthorityLevel:
    """Return the tier `presented_key` grants on `game`.

    Every stored key is compared in constant time, and all three are
    always compared, so the answer does not leak through timing.
    """
    if not presented_key:
        return AuthorityLevel.UNAUTHORIZED
    is_admin = _matches(presented_key, game.admin_key)
    is_write = _matches(presented_key, game.write_key)
    is_read = _matches(presented_key, game.read_key)
    if is_admin:
        return AuthorityLevel.ADMIN
    if is_write:
        return AuthorityLevel.WRITE
    if is_read:
        return AuthorityLevel.READ
    return AuthorityLevel.UNAUTHORIZED


def check_authority(current: AuthorityLevel, required: AuthorityLevel) -> None:
    """Raise Unauthorized for no/garbage keys, Forbidden for a tier below `required`."""
    if current == AuthorityLevel.UNAUTHORIZED:
        raise Unauthorized()
    if current < required:
        raise Forbidden(f'{required.name.lower()} authority required')
