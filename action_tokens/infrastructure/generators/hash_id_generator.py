"""Hash id token generator.

Encodes an integer id into a short, reversible string with the hashids
algorithm. Deterministic: the same id and salt always give the same token,
so uniqueness comes from the id itself (e.g. an invitation primary key).

Usage:
    generator = HashIdGenerator(id=invitation.id, salt=settings.secret_key)
    token = generator.generate()  # e.g. "Nk9Pz2"
"""

from hashids import Hashids


class HashIdGenerator:
    """Id-derived token generator.

    Args:
        id: Non-negative integer to encode.
        salt: Salt that makes encodings application specific.
        min_length: Minimum output length (default 6).

    Raises:
        ValueError: If id is negative or min_length is negative.
    """

    def __init__(self, id: int, salt: str = "", min_length: int = 6) -> None:  # noqa: A002
        if id < 0:
            raise ValueError("id must be non-negative")
        if min_length < 0:
            raise ValueError("min_length must be non-negative")
        self.id = id
        self._hashids = Hashids(salt=salt, min_length=min_length)

    def generate(self) -> str:
        return self._hashids.encode(self.id)

    def decode(self, value: str) -> int | None:
        """Recover the id from a generated token (None if not decodable)."""
        decoded = self._hashids.decode(value)
        return decoded[0] if decoded else None
