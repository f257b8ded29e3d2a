#!/usr/bin/env python3
"""Recompute cached engagement counters from the stored facts.

Repairs blog post likes and views, comment likes and poll option votes.
Safe to run while the API is serving; each run is one transaction.
"""

import asyncio
import sys

import logfire
from dishka import Scope

from portal.config import Settings
from portal.domain.service import EngagementService
from portal.util.di.container import create_container
from portal.util.logging import get_logger, setup_logging
from portal.util.observability import configure_logfire

logger = get_logger(__name__)


async def reconcile() -> int:
    container = create_container()
    try:
        async with container(scope=Scope.REQUEST) as request_container:
            engagement_service = await request_container.get(EngagementService)
            report = await engagement_service.reconcile_counters()
    finally:
        await container.close()

    logger.info(
        f"Reconciled counters: blog_posts={report.blog_posts_fixed}/{report.blog_posts_checked}, "
        f"comments={report.comments_fixed}/{report.comments_checked}, "
        f"poll_options={report.poll_options_fixed}/{report.poll_options_checked}, "
        f"resources={report.resources_fixed}/{report.resources_checked}"
    )
    return report.total_fixed


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        fixed = asyncio.run(reconcile())
        logfire.info("Counter reconciliation finished", fixed=fixed)
        return 0
    except Exception as e:
        logfire.error(
            "Counter reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
