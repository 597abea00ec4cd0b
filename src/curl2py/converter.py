"""One-call conversion from cURL text to Python code."""

from curl2py.generator.code import generate_code
from curl2py.generator.options import GenerationOptions
from curl2py.parser.curl import parse_curl


def convert(raw: str, options: GenerationOptions) -> str:
    """Parse ``raw`` and render it; parse errors propagate unchanged."""
    return generate_code(parse_curl(raw), options)
