"""Pieces of generated code derived from a CurlRequest.

Covers the variable preamble (headers, cookies, data), the choice
between a JSON and a raw body, and the keyword arguments each target
library passes per request or per session.
"""

import json

from curl2py.parser.base import CurlRequest

from .literals import py_dict, py_literal, py_number, py_str
from .writer import CodeWriter


def write_preamble(writer: CodeWriter, request: CurlRequest) -> None:
    """Assign ``headers``, ``cookies`` and ``data`` ahead of the call."""
    if request.headers:
        writer.raw(f"headers = {py_dict(dict(request.headers))}")
        writer.line()
    if request.cookies:
        writer.raw(f"cookies = {py_dict(dict(request.cookies))}")
        writer.line()
    if request.data:
        writer.raw(f"data = {body_literal(request.data)}")
        writer.line()


def body_literal(raw: str) -> str:
    """Render a body as a structured literal if it is JSON, else as a string."""
    try:
        return py_literal(_load_json(raw))
    except (json.JSONDecodeError, ValueError):
        return py_str(raw)


def is_json_body(request: CurlRequest) -> bool:
    """Decide whether the body goes out as ``json=`` rather than ``data=``.

    True when the body parses as JSON, or when a Content-Type header
    mentions json even though the body does not parse.
    """
    try:
        _load_json(request.data or "")
        return True
    except (json.JSONDecodeError, ValueError):
        pass
    for name, value in request.headers.items():
        if name.lower() == "content-type":
            return "json" in value
    return False


def body_keyword(request: CurlRequest) -> str | None:
    if not request.data:
        return None
    return "json=data" if is_json_body(request) else "data=data"


def proxy_url(request: CurlRequest) -> str | None:
    """Combine proxy host and credentials into a single URL."""
    if not request.proxy:
        return None
    scheme, sep, host = request.proxy.partition("://")
    if not sep:
        scheme, host = "http", request.proxy
    if request.proxy_auth:
        return f"{scheme}://{request.proxy_auth}@{host}"
    return f"{scheme}://{host}"


def format_number(value: float) -> str:
    """Print whole numbers without a fractional part: 5.0 -> '5'."""
    return str(int(value)) if value.is_integer() else py_number(value)


# -- keyword arguments per library ---------------------------------------------

def _payload_kwargs(request: CurlRequest) -> list[str]:
    kwargs = []
    if request.headers:
        kwargs.append("headers=headers")
    if request.cookies:
        kwargs.append("cookies=cookies")
    body = body_keyword(request)
    if body:
        kwargs.append(body)
    return kwargs


def _auth_tuple(request: CurlRequest) -> str:
    return f"auth=({py_str(request.auth.user)}, {py_str(request.auth.password)})"


def requests_kwargs(request: CurlRequest) -> list[str]:
    kwargs = _payload_kwargs(request)
    if request.auth:
        kwargs.append(_auth_tuple(request))
    url = proxy_url(request)
    if url:
        kwargs.append(f"proxies={{'http': {py_str(url)}, 'https': {py_str(url)}}}")
    if request.insecure:
        kwargs.append("verify=False")
    if request.timeout:
        kwargs.append(f"timeout={format_number(request.timeout)}")
    return kwargs


def httpx_kwargs(request: CurlRequest) -> list[str]:
    kwargs = _payload_kwargs(request)
    if request.auth:
        kwargs.append(_auth_tuple(request))
    url = proxy_url(request)
    if url:
        kwargs.append(f"proxy={py_str(url)}")
    if request.insecure:
        kwargs.append("verify=False")
    if request.timeout:
        kwargs.append(f"timeout={format_number(request.timeout)}")
    return kwargs


def aiohttp_kwargs(request: CurlRequest) -> list[str]:
    """Per-request arguments; auth and timeout belong to the session."""
    kwargs = _payload_kwargs(request)
    url = proxy_url(request)
    if url:
        kwargs.append(f"proxy={py_str(url)}")
    if request.insecure:
        kwargs.append("ssl=False")
    return kwargs


def aiohttp_session_kwargs(request: CurlRequest) -> list[str]:
    kwargs = []
    if request.auth:
        kwargs.append(
            f"auth=aiohttp.BasicAuth({py_str(request.auth.user)}, {py_str(request.auth.password)})"
        )
    if request.timeout:
        kwargs.append(f"timeout=aiohttp.ClientTimeout(total={format_number(request.timeout)})")
    return kwargs


def _load_json(raw: str):
    return json.loads(raw, parse_constant=_reject_constant)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")
