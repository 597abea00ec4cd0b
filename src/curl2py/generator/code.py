"""Code generator: renders a CurlRequest as Python client code."""

from typing import Callable

from curl2py.exceptions import UnsupportedTargetError
from curl2py.parser.base import CurlRequest

from .options import GenerationOptions, Library
from .targets import render_aiohttp, render_httpx_async, render_httpx_sync, render_requests

RENDERERS: dict[Library, Callable[[CurlRequest, GenerationOptions], str]] = {
    Library.REQUESTS: render_requests,
    Library.HTTPX_SYNC: render_httpx_sync,
    Library.HTTPX_ASYNC: render_httpx_async,
    Library.AIOHTTP: render_aiohttp,
}


def generate_code(request: CurlRequest, options: GenerationOptions) -> str:
    """Render the request for the library selected in ``options``.

    The result depends only on the arguments, so equal inputs always
    give identical text.
    """
    try:
        renderer = RENDERERS[Library(options.library)]
    except (KeyError, ValueError):
        raise UnsupportedTargetError(f"Unsupported library: {options.library!r}") from None
    return renderer(request, options)
