"""Token generator protocol.

Produces candidate token strings. Uniqueness is NOT the generator's job:
the lifecycle manager retries until a candidate is free.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenGeneratorProtocol(Protocol):
    """Protocol for token string generators."""

    def generate(self) -> str:
        """Return a candidate token string."""
        ...
