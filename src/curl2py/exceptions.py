"""Exceptions raised by curl2py."""


class Curl2PyError(Exception):
    """Base exception for all curl2py errors."""
    pass


class ParseError(Curl2PyError):
    """Raised when a cURL command cannot be turned into a request."""
    pass


class FormatError(ParseError):
    """Raised when the input does not look like a cURL invocation."""

    def __init__(self, message: str = 'Command must start with "curl"'):
        super().__init__(message)


class MissingTargetError(ParseError):
    """Raised when no request URL can be found in the command."""

    def __init__(self, message: str = "URL not found"):
        super().__init__(message)


class UnsupportedTargetError(Curl2PyError):
    """Raised when code generation is asked for an unknown library."""
    pass


class ConfigError(Curl2PyError):
    """Raised when a configuration file is unreadable or invalid."""
    pass
