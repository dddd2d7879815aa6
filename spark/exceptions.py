"""
Domain exceptions for the Spark spot price service.
"""


class SparkException(Exception):
    """Base exception for all Spark service errors."""
    pass


class DataFetchError(SparkException):
    """Raised when spot prices cannot be fetched or decoded."""
    pass
