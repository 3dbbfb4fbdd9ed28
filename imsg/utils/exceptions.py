"""Custom exception classes for the imsg codec."""


class ImsgError(Exception):
    """Base exception class for all imsg errors."""
    pass


class DataTooLargeError(ImsgError):
    """Exception raised when a payload does not fit in a single message."""
    
    def __init__(self, data_length: int, max_length: int):
        self.data_length = data_length
        self.max_length = max_length
        super().__init__(
            f"imsg: provided data is too large "
            f"({data_length} bytes > {max_length} bytes)"
        )


class LengthOutOfBoundsError(ImsgError):
    """Exception raised when a received header declares an invalid length."""
    
    def __init__(self, length: int, min_length: int, max_length: int):
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"imsg: message length ({length} bytes) is out of allowed bounds "
            f"({min_length} - {max_length} bytes)"
        )


class InsufficientDataError(ImsgError):
    """Exception raised when the source ends before the full payload is read."""
    
    def __init__(self, expected: int, read: int):
        self.expected = expected
        self.read = read
        super().__init__(
            f"imsg: insufficient data provided "
            f"(expected {expected} bytes, read {read} bytes)"
        )


class ConfigurationError(ImsgError):
    """Exception raised when configuration is invalid or missing."""
    pass
