"""Single-use action tokens (password resets, email verification, magic links).

Layers:
    core: configuration, Result type, error codes, dependency container
    domain: entities, value objects, errors, events and protocols (ports)
    application: token type registry, throttling and lifecycle manager
    infrastructure: SQLAlchemy persistence, Redis attempt storage,
        generators, logging and in-memory event bus (adapters)
    jobs: operational commands (dead token reaping)
"""

__version__ = "0.1.0"
