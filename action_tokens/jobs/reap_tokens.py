"""Dead token reaper.

Hard-deletes every used, expired or soft-deleted action token. Safe to run
repeatedly (cron, systemd timer, Kubernetes CronJob).

Configuration errors (e.g. SECRET_KEY unset) are reported on stderr with
exit code 1.

Usage:
    action-tokens-reap
    python -m action_tokens.jobs.reap_tokens
"""

import asyncio
import sys

from pydantic import ValidationError

from action_tokens.core.container import get_database, get_logger, get_token_manager
from action_tokens.infrastructure.persistence.database import Database


async def reap_tokens(database: Database | None = None) -> int:
    """Remove dead tokens.

    Args:
        database: Database to clean (defaults to the container's).

    Returns:
        Number of tokens removed.
    """
    database = database or get_database()
    async with database.get_session() as session:
        manager = get_token_manager(session)
        return await manager.reap()


def main() -> int:
    """Console entry point.

    Returns:
        Process exit code.
    """
    try:
        logger = get_logger()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    try:
        removed = asyncio.run(reap_tokens())
    except Exception as exc:
        logger.error("token_reap_failed", error=exc)
        return 1
    print(f"Removed {removed} dead tokens.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
