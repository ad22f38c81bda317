"""Domain layer - Pure business logic.

This layer contains the token entity, value objects, errors, protocols
(ports) and domain events. It has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
    entities/: ActionToken
    value_objects/: OwnerRef
    enums/: PreviousStrategy
    errors/: TokenError variants (returned in Result, never raised)
    events/: TokenCreated, TokenUsed
    protocols/: Repository, storage, generator, token type and logger ports
"""
