"""Short code token generator.

Human-typable codes (email verification, OTP-style confirmation). The
default pool leaves out characters that are easy to confuse when read
aloud or typed: 0/O, 1/I, and lowercase letters.
"""

import secrets

DEFAULT_POOL = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"
DEFAULT_LENGTH = 8


class ShortCodeGenerator:
    """Fixed-length code drawn from a character pool.

    Args:
        length: Code length (default 8).
        pool: Characters to draw from.

    Raises:
        ValueError: If length < 1 or pool is empty.
    """

    def __init__(self, length: int = DEFAULT_LENGTH, pool: str = DEFAULT_POOL) -> None:
        if length < 1:
            raise ValueError("length must be at least 1")
        if not pool:
            raise ValueError("pool must not be empty")
        self.length = length
        self.pool = pool

    def generate(self) -> str:
        return "".join(secrets.choice(self.pool) for _ in range(self.length))
