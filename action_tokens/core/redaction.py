"""Log redaction helpers.

Token values are bearer credentials: logs only ever carry a short prefix.
"""

from action_tokens.core.constants import TOKEN_LOG_PREFIX_LENGTH


def truncate_token(value: str) -> str:
    """Return the first few characters of a token value followed by "...".

    Example:
        >>> truncate_token("a3f9c2d1e8b7a6f5")
        'a3f9c2d1...'
    """
    return f"{value[:TOKEN_LOG_PREFIX_LENGTH]}..."
