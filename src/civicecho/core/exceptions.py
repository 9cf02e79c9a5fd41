"""Custom exceptions for CivicEcho."""


class CivicEchoError(Exception):
    """Base exception for CivicEcho"""

    def __init__(self, message: str = "CivicEcho error"):
        self.message = message
        super().__init__(self.message)


class InvalidCSVError(CivicEchoError, ValueError):
    """Raised when an upload yields no usable comment rows"""

    def __init__(self, message: str = "No valid data found in CSV file"):
        super().__init__(message)
