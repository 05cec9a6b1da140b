"""Custom exceptions for the flight finder."""

__all__ = [
    "FlightFinderError",
    "MissingSourceError",
    "MalformedRecordError",
    "ConfigurationError",
]


class FlightFinderError(Exception):
    """Base exception for all flight finder errors."""

    pass


class MissingSourceError(FlightFinderError):
    """Raised when an airport or event source does not exist."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path
        if file_path:
            message = f"{message} (File: {file_path})"
        super().__init__(message)


class MalformedRecordError(FlightFinderError):
    """Raised when a record cannot be read as an airport or event."""

    def __init__(self, message: str, file_path: str = None, line_number: int = None):
        self.file_path = file_path
        self.line_number = line_number
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        """Format error message with file and line information."""
        parts = [message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.line_number:
            parts.append(f"Line: {self.line_number}")
        return " | ".join(parts)


class ConfigurationError(FlightFinderError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str = None):
        self.config_key = config_key
        if config_key:
            message = f"{message} (Key: {config_key})"
        super().__init__(message)
