"""Domain value objects package.

Usage:
    from action_tokens.domain.value_objects import OwnerRef
"""

from action_tokens.domain.value_objects.owner_ref import OwnerRef

__all__ = ["OwnerRef"]
