"""Token lifecycle manager.

Issues, consumes and reaps action tokens. All expected failures are
returned as Failure(TokenError); only callback and database exceptions
propagate.

Generation (generate_for):
    1. Resolve token type
    2. Generation throttle (per type and requester)
    3. Expiration from ttl
    4. Previous token strategy (remove / reuse / keep)
    5. Unique value within the attempt budget
    6. Persist, publish TokenCreated

Usage (use):
    1. Resolve token type
    2. Usage throttle wraps 3-7 (cleared on success)
    3. Validate value
    4. Latest live token for (value, name)
    5. Guards: expired, used, owner mismatch (in that order)
    6. Load owner, invoke callback; ``False`` means "do not consume"
    7. Mark used, publish TokenUsed

Usage:
    match await manager.generate_for(user, "password.reset", requester=client_ip):
        case Success(value=token):
            send_reset_link(user, token.value)
        case Failure(error=LockoutError(unlock_at=unlock_at)):
            ...

    match await manager.use(value, "password.reset", set_password, requester=client_ip):
        case Success(value=user):
            ...
        case Failure(error=TokenExpiredError()):
            ...
"""

import inspect
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from action_tokens.application.token_types import (
    TokenTypeRegistry,
    resolve_expiration,
    resolve_interval_seconds,
    resolve_max_attempts,
    resolve_previous,
)
from action_tokens.core.constants import (
    DEFAULT_GENERATION_ATTEMPTS,
    TOKEN_VALUE_MAX_LENGTH,
    UNKNOWN_REQUESTER,
)
from action_tokens.core.redaction import truncate_token
from action_tokens.core.result import Failure, Result, Success
from action_tokens.domain.entities import ActionToken
from action_tokens.domain.enums import PreviousStrategy
from action_tokens.domain.errors import (
    GenerationExhaustedError,
    InvalidTokenError,
    LockoutError,
    TokenAccessDeniedError,
    TokenAlreadyUsedError,
    TokenConfigError,
    TokenError,
    TokenExpiredError,
    TokenNotFoundError,
)
from action_tokens.domain.events import TokenCreated, TokenUsed
from action_tokens.domain.protocols import (
    EventBusProtocol,
    GenerationLimitedProtocol,
    LoggerProtocol,
    OwnerLoaderProtocol,
    RateLimiterProtocol,
    TokenRepository,
    TokenTypeProtocol,
    UsageLimitedProtocol,
)
from action_tokens.domain.value_objects import OwnerRef

TokenTypeRef = str | TokenTypeProtocol
UseCallback = Callable[[Any], Any]


def _generation_throttled(token_type: TokenTypeProtocol) -> bool:
    if not isinstance(token_type, GenerationLimitedProtocol):
        return False
    return bool(getattr(token_type, "generation_throttling", True))


def _usage_throttled(token_type: TokenTypeProtocol) -> bool:
    if not isinstance(token_type, UsageLimitedProtocol):
        return False
    return bool(getattr(token_type, "usage_throttling", True))


def _throttle_window(
    attempts: Any, interval: Any, token_name: str
) -> Result[tuple[int, int], TokenConfigError]:
    match resolve_max_attempts(attempts, token_name):
        case Failure() as failure:
            return failure
        case Success(value=max_attempts):
            pass
    match resolve_interval_seconds(interval, token_name):
        case Failure() as failure:
            return failure
        case Success(value=window_seconds):
            return Success(value=(max_attempts, window_seconds))


class TokenLifecycleManager:
    """Orchestrates token generation, usage and cleanup.

    Args:
        registry: Token type registry (names to options).
        repository: Token persistence.
        limiter: Throttle limiter.
        owner_loader: Loads owner entities back from OwnerRef.
        event_bus: Receives TokenCreated / TokenUsed.
        logger: Structured logger.
        generation_attempts: Candidate values tried before giving up.
    """

    def __init__(
        self,
        *,
        registry: TokenTypeRegistry,
        repository: TokenRepository,
        limiter: RateLimiterProtocol,
        owner_loader: OwnerLoaderProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        generation_attempts: int = DEFAULT_GENERATION_ATTEMPTS,
    ) -> None:
        if generation_attempts < 1:
            raise ValueError("generation_attempts must be at least 1")
        self._registry = registry
        self._repository = repository
        self._limiter = limiter
        self._owner_loader = owner_loader
        self._event_bus = event_bus
        self._logger = logger
        self._generation_attempts = generation_attempts

    # =========================================================================
    # Generation
    # =========================================================================

    async def generate_for(
        self,
        owner: Any,
        token_type: TokenTypeRef,
        *,
        requester: str | None = None,
    ) -> Result[ActionToken, TokenError]:
        """Issue a token of ``token_type`` for ``owner``.

        Args:
            owner: Owning entity (anything with ``id``) or OwnerRef.
            token_type: Registered type name or token type object.
            requester: Identity the generation throttle is keyed on
                (e.g. client IP).

        Returns:
            Success(ActionToken), or Failure with TokenConfigError,
            LockoutError or GenerationExhaustedError.
        """
        match self._registry.resolve(token_type):
            case Failure() as failure:
                return failure
            case Success(value=resolved):
                pass

        owner_ref = OwnerRef.of(owner)
        name = resolved.name
        logger = self._logger.bind(token_name=name, owner=str(owner_ref))

        if _generation_throttled(resolved):
            match _throttle_window(
                resolved.generation_attempts,  # type: ignore[attr-defined]
                resolved.generation_attempts_interval,  # type: ignore[attr-defined]
                name,
            ):
                case Failure() as failure:
                    return failure
                case Success(value=(max_attempts, window_seconds)):
                    pass
            key = resolved.generation_limiter_key(  # type: ignore[attr-defined]
                requester or UNKNOWN_REQUESTER
            )
            match await self._limiter.attempt(key, max_attempts, window_seconds):
                case Failure() as lockout:
                    logger.warning("token_generation_locked_out", requester=requester)
                    return lockout

        match resolve_expiration(resolved.ttl, name):
            case Failure() as failure:
                return failure
            case Success(value=expires_at):
                pass

        match resolve_previous(resolved.previous, name):
            case Failure() as failure:
                return failure
            case Success(value=strategy):
                pass

        previous: ActionToken | None = None
        if strategy in (PreviousStrategy.REUSE, PreviousStrategy.REMOVE):
            previous = await self._repository.find_active_for_owner(owner_ref, name)

        if strategy is PreviousStrategy.REUSE and previous is not None:
            # Reuse only ever extends; a later stored expiry is kept
            if expires_at > previous.expires_at:
                await self._repository.extend_expiration(previous.id, expires_at)
                previous.expires_at = expires_at
            logger.info(
                "token_reused",
                token_id=previous.id,
                token=truncate_token(previous.value),
                expires_at=previous.expires_at.isoformat(),
            )
            await self._event_bus.publish(TokenCreated(token=previous, token_name=name))
            return Success(value=previous)

        replacing = previous if strategy is PreviousStrategy.REMOVE else None
        match await self._unique_value(resolved, replacing=replacing):
            case Failure() as failure:
                logger.error(
                    "token_generation_exhausted",
                    attempts=self._generation_attempts,
                )
                return failure
            case Success(value=value):
                pass

        if strategy is PreviousStrategy.REMOVE and previous is not None:
            await self._repository.soft_delete(previous.id)
            logger.info(
                "token_previous_removed",
                token_id=previous.id,
                token=truncate_token(previous.value),
            )

        token = await self._repository.create(owner_ref, name, value, expires_at)
        logger.info(
            "token_generated",
            token_id=token.id,
            token=truncate_token(token.value),
            strategy=strategy.value,
            expires_at=expires_at.isoformat(),
        )
        await self._event_bus.publish(TokenCreated(token=token, token_name=name))
        return Success(value=token)

    async def _unique_value(
        self,
        token_type: TokenTypeProtocol,
        *,
        replacing: ActionToken | None = None,
    ) -> Result[str, TokenError]:
        """Draw candidates until one is free among live tokens of the type.

        A candidate held only by ``replacing`` counts as free: that token is
        soft-deleted before the new one is stored.
        """
        for _ in range(self._generation_attempts):
            candidate = token_type.generate()
            if not isinstance(candidate, str) or not candidate:
                return Failure(
                    error=TokenConfigError(
                        message=(
                            f"Generator of token type '{token_type.name}' "
                            f"returned {candidate!r}; expected a non-empty string"
                        ),
                        token_name=token_type.name,
                    )
                )
            if len(candidate) > TOKEN_VALUE_MAX_LENGTH:
                return Failure(
                    error=TokenConfigError(
                        message=(
                            f"Generator of token type '{token_type.name}' returned "
                            f"a value longer than {TOKEN_VALUE_MAX_LENGTH} characters"
                        ),
                        token_name=token_type.name,
                    )
                )
            existing = await self._repository.find_by_value_and_name(
                candidate, token_type.name
            )
            if existing is None or (
                replacing is not None and existing.id == replacing.id
            ):
                return Success(value=candidate)

        return Failure(
            error=GenerationExhaustedError(
                message=(
                    f"No unique value for token type '{token_type.name}' after "
                    f"{self._generation_attempts} attempts"
                ),
                token_name=token_type.name,
            )
        )

    # =========================================================================
    # Usage
    # =========================================================================

    async def use(
        self,
        value: Any,
        token_type: TokenTypeRef,
        callback: UseCallback,
        expected_owner: Any = None,
        *,
        requester: str | None = None,
    ) -> Result[Any, TokenError]:
        """Consume a token and hand its owner to ``callback``.

        ``callback(owner)`` may be sync or async. Returning ``False`` leaves
        the token unconsumed. Exceptions raised by the callback propagate;
        the token stays unused and the throttle attempt stays counted.

        Args:
            value: Token string supplied by the user.
            token_type: Registered type name or token type object.
            callback: Action to run with the owner entity.
            expected_owner: If given, the token must belong to this owner.
            requester: Identity the usage throttle is keyed on.

        Returns:
            Success(owner entity), or Failure with a TokenError variant.
        """
        match self._registry.resolve(token_type):
            case Failure() as failure:
                return failure
            case Success(value=resolved):
                pass

        async def consume() -> Result[Any, TokenError]:
            return await self._consume(value, resolved, callback, expected_owner)

        if not _usage_throttled(resolved):
            return await consume()

        match _throttle_window(
            resolved.usage_attempts,  # type: ignore[attr-defined]
            resolved.usage_attempts_interval,  # type: ignore[attr-defined]
            resolved.name,
        ):
            case Failure() as failure:
                return failure
            case Success(value=(max_attempts, window_seconds)):
                pass

        key = resolved.usage_limiter_key(  # type: ignore[attr-defined]
            requester or UNKNOWN_REQUESTER
        )
        result = await self._limiter.limit(key, max_attempts, window_seconds, consume)
        match result:
            case Failure(error=LockoutError()):
                self._logger.warning(
                    "token_usage_locked_out",
                    token_name=resolved.name,
                    requester=requester,
                )
        return result

    async def use_for(
        self,
        value: Any,
        token_type: TokenTypeRef,
        expected_owner: Any,
        callback: UseCallback,
        *,
        requester: str | None = None,
    ) -> Result[Any, TokenError]:
        """``use`` with a mandatory expected owner."""
        if expected_owner is None:
            raise ValueError("expected_owner is required")
        return await self.use(
            value, token_type, callback, expected_owner, requester=requester
        )

    async def _consume(
        self,
        value: Any,
        token_type: TokenTypeProtocol,
        callback: UseCallback,
        expected_owner: Any,
    ) -> Result[Any, TokenError]:
        name = token_type.name

        if not isinstance(value, str) or not value or len(value) > TOKEN_VALUE_MAX_LENGTH:
            return Failure(error=InvalidTokenError())

        logger = self._logger.bind(token_name=name, token=truncate_token(value))

        token = await self._repository.find_by_value_and_name(value, name)
        if token is None:
            logger.info("token_not_found")
            return Failure(error=TokenNotFoundError())

        now = datetime.now(UTC)
        if token.is_expired(now):
            logger.info("token_expired", token_id=token.id)
            return Failure(error=TokenExpiredError(token=token))

        if token.is_used():
            logger.info("token_already_used", token_id=token.id)
            return Failure(error=TokenAlreadyUsedError(token=token))

        if expected_owner is not None and token.owner != OwnerRef.of(expected_owner):
            logger.warning(
                "token_access_denied",
                token_id=token.id,
                owner=str(token.owner),
            )
            return Failure(error=TokenAccessDeniedError(expected_owner=expected_owner))

        owner = await self._owner_loader.load(token.owner)
        if owner is None:
            logger.warning("token_owner_missing", token_id=token.id, owner=str(token.owner))
            return Failure(error=TokenNotFoundError())

        outcome = callback(owner)
        if inspect.isawaitable(outcome):
            outcome = await outcome

        if outcome is False:
            logger.info("token_use_skipped", token_id=token.id)
            return Success(value=owner)

        used_at = datetime.now(UTC)
        await self._repository.mark_as_used(token.id, used_at)
        token.used_at = used_at
        logger.info("token_used", token_id=token.id, owner=str(token.owner))
        await self._event_bus.publish(TokenUsed(token=token, token_name=name))
        return Success(value=owner)

    # =========================================================================
    # Maintenance
    # =========================================================================

    async def reap(self) -> int:
        """Hard-delete used, expired and soft-deleted tokens.

        Returns:
            Number of tokens removed.
        """
        removed = await self._repository.purge_dead()
        self._logger.info("tokens_reaped", removed=removed)
        return removed
