"""Infrastructure layer - Adapters for domain ports.

Structure:
- persistence/: SQLAlchemy models, token repository, owner loader
- rate_limit/: Redis attempt counters for throttling
- generators/: Token string generators
- logging/: structlog console adapter
- events/: In-memory event bus and logging handler

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
