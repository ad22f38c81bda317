"""Random hash token generator.

Token Strategy:
    - 40 random characters from the OS CSPRNG
    - HMAC-SHA256 keyed with the application secret
    - 64-character lowercase hex string

Suitable for links (password reset, magic login) where length is no concern.
"""

import hashlib
import hmac
import secrets
import string

from action_tokens.core.constants import RANDOM_SOURCE_LENGTH

_ALPHABET = string.ascii_letters + string.digits


class RandomHashGenerator:
    """HMAC-SHA256 over random input.

    Usage:
        generator = RandomHashGenerator(key=settings.secret_key)
        token = generator.generate()  # 64 hex characters
    """

    def __init__(self, key: str) -> None:
        """Initialize generator.

        Args:
            key: HMAC key (application secret).

        Raises:
            ValueError: If key is empty.
        """
        if not key:
            raise ValueError("RandomHashGenerator requires a non-empty key")
        self._key = key.encode("utf-8")

    def generate(self) -> str:
        """Generate a random hash token.

        Example:
            >>> token = RandomHashGenerator(key="secret").generate()
            >>> len(token)
            64
        """
        source = "".join(secrets.choice(_ALPHABET) for _ in range(RANDOM_SOURCE_LENGTH))
        return hmac.new(self._key, source.encode("utf-8"), hashlib.sha256).hexdigest()
