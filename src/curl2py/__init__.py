"""curl2py: convert cURL commands into Python HTTP client code."""

from curl2py.converter import convert
from curl2py.exceptions import (
    ConfigError,
    Curl2PyError,
    FormatError,
    MissingTargetError,
    ParseError,
    UnsupportedTargetError,
)
from curl2py.generator.code import generate_code
from curl2py.generator.options import GenerationOptions, Library
from curl2py.parser.base import BasicAuth, CurlRequest
from curl2py.parser.curl import parse_curl

__version__ = "0.1.0"

parse = parse_curl
generate = generate_code

__all__ = [
    "BasicAuth",
    "ConfigError",
    "Curl2PyError",
    "CurlRequest",
    "FormatError",
    "GenerationOptions",
    "Library",
    "MissingTargetError",
    "ParseError",
    "UnsupportedTargetError",
    "convert",
    "generate",
    "generate_code",
    "parse",
    "parse_curl",
]
