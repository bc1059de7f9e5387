"""Custom exceptions for the load testing system."""


class LoadTestError(Exception):
    """Base exception for load test failures."""
    pass


class InvalidRunParametersError(LoadTestError):
    """Exception raised when the request count or concurrency is not positive."""
    pass


class RequestError(LoadTestError):
    """Exception raised when a request cannot reach the endpoint."""
    pass


class InvalidResponseFormatError(LoadTestError):
    """Exception raised when a rerank response has no readable top score."""
    pass


class ResultLoadError(LoadTestError):
    """Exception raised when exported results cannot be loaded."""
    pass
