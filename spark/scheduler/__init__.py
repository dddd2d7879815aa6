"""
Scheduler package for the Spark spot price service.
Contains the periodic refresh loop.
"""

from .refresh_scheduler import RefreshScheduler, log_timeline, placeholder, refresh_scheduler

__all__ = [
    "RefreshScheduler",
    "log_timeline",
    "placeholder",
    "refresh_scheduler",
]
