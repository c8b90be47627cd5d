#!/usr/bin/env python3
"""Recompute engagement scores for recent posts.

Entry point for the scheduled batch job; equivalent to
``POST /engagement/calculate {"batch_mode": true}``.
"""

import asyncio
import sys

import logfire

from market.application.usecase.engagement import (
    CalculateEngagementRequest,
    CalculateEngagementUseCase,
)
from market.config import Settings
from market.util.di.container import create_container
from market.util.logging import setup_logging
from market.util.observability import configure_logfire


async def run() -> int:
    """Run one batch pass and return the number of processed posts."""
    container = create_container()
    try:
        # The request scope owns the session; it commits on exit
        async with container() as request_container:
            use_case = await request_container.get(CalculateEngagementUseCase)
            response = await use_case.execute(
                CalculateEngagementRequest(batch_mode=True)
            )
        return response.processed
    finally:
        await container.close()


def main() -> int:
    """Recalculate engagement and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("recalculate_engagement"):
            processed = asyncio.run(run())
        logfire.info("Engagement recalculation finished", processed=processed)
        return 0

    except Exception as e:
        logfire.error(
            "Engagement recalculation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
