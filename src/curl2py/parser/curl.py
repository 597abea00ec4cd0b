"""cURL command parser.

Walks the token stream of a cURL command and builds a CurlRequest.
Parsing is best-effort: a header without a colon, a cookie segment
without ``=`` or an unreadable timeout is skipped, never reported.
"""

import math
import re
from typing import Callable

from curl2py.exceptions import FormatError, MissingTargetError

from .base import BasicAuth, CurlRequest
from .detect import is_curl_command, normalize_command
from .tokenizer import tokenize

# Same prefix rule as JavaScript's parseFloat: "5s" -> 5.0, "abc" -> None
LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NOOP_FLAGS = frozenset({
    "--compressed", "-s", "--silent", "-S", "-i", "-v", "-L", "--location",
})


def parse_curl(raw: str) -> CurlRequest:
    """Parse a raw cURL command into a CurlRequest.

    Raises FormatError when the text does not start with ``curl`` and
    MissingTargetError when no URL token is present.
    """
    command = normalize_command(raw)
    if not is_curl_command(command):
        raise FormatError()

    draft = _new_draft()
    _walk(tokenize(command), draft)

    if not draft["url"]:
        raise MissingTargetError()
    return CurlRequest(**draft)


def _new_draft() -> dict:
    return {
        "url": "",
        "method": "GET",
        "headers": {},
        "cookies": {},
        "data": None,
        "auth": None,
        "proxy": None,
        "proxy_auth": None,
        "insecure": False,
        "timeout": None,
    }


def _walk(tokens: list[str], draft: dict) -> None:
    """Apply every token after the leading ``curl`` to the draft."""
    i = 1
    while i < len(tokens):
        token = tokens[i]
        if token in VALUE_FLAGS:
            # The flag consumes the next token even when it is missing
            value = tokens[i + 1] if i + 1 < len(tokens) else None
            VALUE_FLAGS[token](draft, value)
            i += 2
            continue

        if token in SWITCH_FLAGS:
            SWITCH_FLAGS[token](draft)
        elif token in NOOP_FLAGS:
            pass  # accepted, no effect on the request
        elif not token.startswith("-") and not draft["url"]:
            draft["url"] = token
        i += 1


# -- flag handlers ------------------------------------------------------------

def _set_method(draft: dict, value: str | None) -> None:
    draft["method"] = value.upper() if value else "GET"


def _add_header(draft: dict, value: str | None) -> None:
    if not value:
        return
    name, sep, content = value.partition(":")
    if not sep:
        return
    name = name.strip()
    content = content.strip()
    if name.lower() == "cookie":
        _parse_cookies(content, draft["cookies"])
    else:
        draft["headers"][name] = content


def _set_data(draft: dict, value: str | None) -> None:
    draft["data"] = value
    if draft["method"] == "GET":
        draft["method"] = "POST"


def _add_cookies(draft: dict, value: str | None) -> None:
    if value:
        _parse_cookies(value, draft["cookies"])


def _set_auth(draft: dict, value: str | None) -> None:
    if value:
        user, _, password = value.partition(":")
        draft["auth"] = BasicAuth(user=user, password=password)


def _set_proxy(draft: dict, value: str | None) -> None:
    draft["proxy"] = value


def _set_proxy_auth(draft: dict, value: str | None) -> None:
    draft["proxy_auth"] = value


def _set_user_agent(draft: dict, value: str | None) -> None:
    if value:
        draft["headers"]["User-Agent"] = value


def _set_referer(draft: dict, value: str | None) -> None:
    if value:
        draft["headers"]["Referer"] = value


def _set_timeout(draft: dict, value: str | None) -> None:
    if value:
        draft["timeout"] = _parse_float(value)


def _set_insecure(draft: dict) -> None:
    draft["insecure"] = True


VALUE_FLAGS: dict[str, Callable[[dict, str | None], None]] = {
    "-X": _set_method,
    "--request": _set_method,
    "-H": _add_header,
    "--header": _add_header,
    "-d": _set_data,
    "--data": _set_data,
    "--data-raw": _set_data,
    "--data-binary": _set_data,
    "-b": _add_cookies,
    "--cookie": _add_cookies,
    "-u": _set_auth,
    "--user": _set_auth,
    "-x": _set_proxy,
    "--proxy": _set_proxy,
    "-U": _set_proxy_auth,
    "--proxy-user": _set_proxy_auth,
    "-A": _set_user_agent,
    "--user-agent": _set_user_agent,
    "-e": _set_referer,
    "--referer": _set_referer,
    "-m": _set_timeout,
    "--max-time": _set_timeout,
    "--connect-timeout": _set_timeout,
}

SWITCH_FLAGS: dict[str, Callable[[dict], None]] = {
    "-k": _set_insecure,
    "--insecure": _set_insecure,
}


# -- value parsers ------------------------------------------------------------

def _parse_cookies(text: str, cookies: dict[str, str]) -> None:
    """Add ``name=value`` pairs from a ``;``-separated list."""
    for segment in text.split(";"):
        idx = segment.find("=")
        if idx > 0:
            cookies[segment[:idx].strip()] = segment[idx + 1:].strip()


def _parse_float(text: str) -> float | None:
    match = LEADING_FLOAT.match(text.strip())
    if not match:
        return None
    number = float(match.group())
    return number if math.isfinite(number) else None
