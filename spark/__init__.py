"""
Spark Spot Price Service - today's electricity spot price range

A small service that polls the spot-hinta.fi API and reports the cheapest and
most expensive hours of the current day.

Main components:
- Price service for fetching spot prices with a fail-soft policy
- Range selector for picking the lowest and highest ranked hours
- Refresh scheduler producing a two-entry timeline every cycle
- Domain exceptions for clear error handling
"""

__version__ = "1.0.0"
