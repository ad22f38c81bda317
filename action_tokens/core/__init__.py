"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class and error codes
- Settings and the dependency container

The core module has NO dependencies on other application layers
(the container is the composition root and imports lazily).
"""

from action_tokens.core.enums import ErrorCode
from action_tokens.core.errors import DomainError
from action_tokens.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
