import secrets
import string
from typing import NamedTuple

KEY_ALPHABET = string.ascii_letters + string.digits

READ_KEY_LENGTH = 10
WRITE_KEY_LENGTH = 10
# Admin keys are longer: admin is the most sensitive tier
ADMIN_KEY_LENGTH = 20


def generate_key(length: int) -> str:
    """Generate a random alphanumeric key of exactly `length` characters."""
    if length < 0:
        raise ValueError('key length must not be negative')
    return ''.join(secrets.choice(KEY_ALPHABET) for _ in range(length))


class GameKeys(NamedTuple):
    read_key: str
    write_key: str
    admin_key: str

    @classmethod
    def generate(cls) -> 'GameKeys':
        return cls(
            read_key=generate_key(READ_KEY_LENGTH),
            write_key=generate_key(WRITE_KEY_LENGTH),
            admin_key=generate_key(ADMIN_KEY_LENGTH),
        )

    def to_dict(self):
        return self._asdict()
