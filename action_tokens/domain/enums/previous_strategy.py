"""Previous token strategy enumeration.

Decides what happens to an owner's still-active token of the same type when
a new one is requested.

Usage:
    from action_tokens.domain.enums import PreviousStrategy

    strategy = PreviousStrategy("reuse")
"""

from enum import Enum


class PreviousStrategy(str, Enum):
    """Strategy applied to the owner's current active token during generation.

    String Enum:
        Inherits from str so option values ("remove", "reuse", "keep") coerce
        directly with PreviousStrategy(value).
    """

    REMOVE = "remove"
    """Soft-delete the active token and always create a fresh one."""

    REUSE = "reuse"
    """Extend the active token's expiration and return it unchanged otherwise."""

    KEEP = "keep"
    """Never touch earlier tokens; always create a fresh one."""
