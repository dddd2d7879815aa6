#!/usr/bin/env python3
"""
Development helper scripts for the Spark spot price service.
Provides utilities for manual fetches and configuration checks.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from spark.config import settings
from spark.logging_config import setup_logging
from spark.scheduler.refresh_scheduler import refresh_scheduler
from spark.services.price_service import price_service
from spark.utils.display import format_hour, format_price_cents, to_display


async def fetch_prices_manual():
    """Fetch today's prices and print them ordered by rank."""
    print(f"Fetching prices from {price_service.url}...")
    setup_logging()

    records = await price_service.fetch_prices()

    if not records:
        print("No price data available")
        return

    print(f"\nFound {len(records)} price records:")
    print("-" * 40)
    print(f"{'Rank':<6} {'Hour':<8} {'snt/kWh':>10}")
    print("-" * 40)

    for record in sorted(records, key=lambda r: r.rank if r.rank is not None else 0):
        rank = str(record.rank) if record.rank is not None else "--"
        print(f"{rank:<6} {format_hour(record.timestamp):<8} {format_price_cents(record.price_with_tax):>10}")


async def show_summary():
    """Run one refresh cycle and print the widget view."""
    setup_logging()

    timeline = await refresh_scheduler.run_manual_refresh()
    display = to_display(timeline.entries[0].summary)

    print("Today")
    print(f"  lowest  {display.lowest_hour:<6} {display.lowest_price} {display.unit}")
    print(f"  highest {display.highest_hour:<6} {display.highest_price} {display.unit}")
    print(f"Next refresh: {timeline.refresh_at.isoformat()}")


def show_config():
    """Display current configuration settings."""
    print("Current Configuration:")
    print("-" * 40)
    print(f"API Host: {settings.api_host}")
    print(f"API Port: {settings.api_port}")
    print(f"Debug Mode: {settings.api_debug}")
    print(f"Run Scheduler: {settings.run_scheduler}")
    print(f"Refresh Interval: {settings.refresh_interval_hours} h")
    print(f"Display Timezone: {settings.display_timezone}")
    print(f"Log Level: {settings.log_level}")
    print(f"Upstream: {price_service.url}")


def main():
    """Main script entry point with command selection."""
    if len(sys.argv) < 2:
        print("Spark Development Scripts")
        print("Usage: python scripts/dev.py <command>")
        print("\nAvailable commands:")
        print("  fetch-prices  - Fetch and list today's prices")
        print("  show-summary  - Run one refresh cycle and show the summary")
        print("  show-config   - Display current configuration")
        return

    command = sys.argv[1]

    if command == "fetch-prices":
        asyncio.run(fetch_prices_manual())
    elif command == "show-summary":
        asyncio.run(show_summary())
    elif command == "show-config":
        show_config()
    else:
        print(f"Unknown command: {command}")
        print("Run without arguments to see available commands")


if __name__ == "__main__":
    main()
