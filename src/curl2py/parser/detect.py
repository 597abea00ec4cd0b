"""Normalise raw command text and detect whether it is a cURL invocation."""

import re

LINE_CONTINUATION = re.compile(r"\\\r?\n")
WHITESPACE_RUN = re.compile(r"\s+")


def normalize_command(raw: str) -> str:
    """Join continued lines and collapse whitespace into single spaces."""
    command = LINE_CONTINUATION.sub(" ", raw)
    command = WHITESPACE_RUN.sub(" ", command)
    return command.strip()


def is_curl_command(command: str) -> bool:
    """Check that a normalised command starts with the ``curl`` program name.

    A bare ``curl`` counts as a cURL command; it just has no URL.
    """
    lowered = command.lower()
    return lowered == "curl" or lowered.startswith("curl ")
