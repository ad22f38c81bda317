"""Error value base class.

Errors are frozen dataclasses carried inside Failure; they are never raised.
Subclasses pin a default ErrorCode and add their payload fields:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class TokenExpiredError(TokenError):
        code: ErrorCode = ErrorCode.TOKEN_EXPIRED
        token: ActionToken
"""

from dataclasses import dataclass
from typing import Any

from action_tokens.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base for every error value in the package.

    Attributes:
        code: Stable machine-readable code.
        message: Text suitable for logs and API responses.
        details: Extra diagnostic fields.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
