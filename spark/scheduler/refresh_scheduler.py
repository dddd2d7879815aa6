"""
Refresh scheduler for the spot price pipeline.
Runs fetch -> select -> emit immediately and then again every refresh
interval. Each cycle is independent; nothing is carried over.
"""

import asyncio
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Optional

from spark.config import settings
from spark.logging_config import get_logger
from spark.models.price import DailySummary, Timeline, TimelineEntry
from spark.services.price_service import PriceService, price_service
from spark.services.range_selector import build_summary
from spark.utils.display import to_display

logger = get_logger(__name__)

RenderCallback = Callable[[Timeline], Awaitable[None]]


async def log_timeline(timeline: Timeline) -> None:
    """Default render target: log the display strings of the current entry."""
    current = timeline.entries[0]
    display = to_display(current.summary)
    logger.info(
        "Spot price summary",
        lowest=f"{display.lowest_hour} {display.lowest_price} {display.unit}",
        highest=f"{display.highest_hour} {display.highest_price} {display.unit}",
        refresh_at=timeline.refresh_at.isoformat(),
    )


def placeholder(now: Optional[datetime] = None) -> TimelineEntry:
    """Entry with no prices, for render targets that need a "no data" state."""
    now = now or datetime.now().astimezone()
    return TimelineEntry(date=now, summary=DailySummary(as_of=now))


class RefreshScheduler:
    """Periodic refresh loop producing a two-entry timeline per cycle."""

    def __init__(
        self,
        service: PriceService = None,
        render: Optional[RenderCallback] = None,
        interval_hours: int = None,
    ):
        self.service = service or price_service
        self.render = render or log_timeline
        self.interval = timedelta(hours=interval_hours or settings.refresh_interval_hours)
        self._running = False
        self._task: Optional[asyncio.Task] = None

    async def run_cycle(self, now: Optional[datetime] = None) -> Timeline:
        """
        Run one fetch -> select cycle.

        Returns a timeline with an entry for `now` and one for `now + interval`,
        both carrying the same summary.
        """
        now = now or datetime.now().astimezone()
        next_fetch = now + self.interval

        records = await self.service.fetch_prices()
        summary = build_summary(records, as_of=now)
        if not summary.has_data:
            logger.warning("No spot price data for this cycle", as_of=now.isoformat())

        return Timeline(
            entries=[
                TimelineEntry(date=now, summary=summary),
                TimelineEntry(date=next_fetch, summary=summary),
            ],
            refresh_at=next_fetch,
        )

    async def start(self) -> None:
        """Start the refresh loop as a background task."""
        if self._running:
            logger.warning("Scheduler already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._scheduler_loop())
        logger.info("Scheduler started", interval_hours=self.interval.total_seconds() / 3600)

    async def stop(self) -> None:
        """Stop the refresh loop."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        logger.info("Scheduler stopped")

    async def _scheduler_loop(self) -> None:
        """Main loop: cycle, emit, sleep until the timeline's refresh time."""
        while self._running:
            cycle_start = datetime.now().astimezone()
            timeline = await self.run_cycle(cycle_start)

            try:
                await self.render(timeline)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error("Render target failed", error=str(e))

            sleep_seconds = (timeline.refresh_at - datetime.now().astimezone()).total_seconds()
            if sleep_seconds > 0:
                logger.debug("Next refresh scheduled", next_run=timeline.refresh_at.isoformat(), sleep_seconds=sleep_seconds)
                await asyncio.sleep(sleep_seconds)

    async def run_manual_refresh(self) -> Timeline:
        """Run one cycle outside the loop and hand it to the render target."""
        logger.info("Running manual refresh")
        timeline = await self.run_cycle()
        await self.render(timeline)
        return timeline

    @property
    def is_running(self) -> bool:
        """Check if scheduler is running."""
        return self._running


# Global scheduler instance
refresh_scheduler = RefreshScheduler()
