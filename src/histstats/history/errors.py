"""
Custom exceptions for history decoding and classification
"""

class HistoryError(Exception):
    """Base class for history-related exceptions"""
    pass

class HistoryUnavailableError(HistoryError):
    """Raised when the history file cannot be located or opened"""
    pass

class TokenDecodeError(HistoryError):
    """Raised when a command token is not valid UTF-8"""

    def __init__(self, token: bytes):
        super().__init__(f"Token is not valid UTF-8: {token!r}")
        self.token = token
