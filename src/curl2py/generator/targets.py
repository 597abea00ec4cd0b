"""Code emitters, one per target library.

Each emitter renders a complete script: optional imports, the
variable preamble, then the request call. Nesting comes from the
session block, the try/except block and the async ``main()`` wrapper,
one indentation level each.
"""

from curl2py.parser.base import CurlRequest

from .literals import py_str
from .options import GenerationOptions
from .request_args import (
    aiohttp_kwargs,
    aiohttp_session_kwargs,
    body_keyword,
    httpx_kwargs,
    requests_kwargs,
    write_preamble,
)
from .writer import CodeWriter

# Methods with a shortcut such as ``session.get``; anything else goes through ``.request``
SHORTCUT_METHODS = frozenset({"get", "post", "put", "patch", "delete", "head", "options"})
# httpx shortcuts that accept json=, data= or content=
HTTPX_BODY_METHODS = frozenset({"post", "put", "patch"})

ERROR_MESSAGE = 'print(f"Error: {e}")'


def render_requests(request: CurlRequest, options: GenerationOptions) -> str:
    writer = _start(request, options, ["requests"])
    _render_sync(
        writer, request, options,
        module="requests",
        client="requests.Session() as session",
        receiver="session",
        error="requests.RequestException",
        kwargs=requests_kwargs(request),
    )
    return writer.render()


def render_httpx_sync(request: CurlRequest, options: GenerationOptions) -> str:
    writer = _start(request, options, ["httpx"])
    _render_sync(
        writer, request, options,
        module="httpx",
        client="httpx.Client() as client",
        receiver="client",
        error="httpx.HTTPError",
        kwargs=httpx_kwargs(request),
        shortcuts=_httpx_shortcuts(request),
    )
    return writer.render()


def render_httpx_async(request: CurlRequest, options: GenerationOptions) -> str:
    """httpx has no module-level coroutines, so an AsyncClient is always opened."""
    writer = _start(request, options, ["asyncio", "httpx"])
    head, args = _call_parts("await client", request, _httpx_shortcuts(request))
    args += httpx_kwargs(request)

    def body(returns: bool) -> None:
        if options.add_error_handling:
            with writer.block("try:"):
                with writer.block("async with httpx.AsyncClient() as client:"):
                    writer.call(f"response = {head}(", args)
                    writer.line("response.raise_for_status()")
                    writer.line(_emit("response.json()", returns))
            with writer.block("except httpx.HTTPError as e:"):
                writer.line(ERROR_MESSAGE)
        else:
            with writer.block("async with httpx.AsyncClient() as client:"):
                writer.call(f"response = {head}(", args)
                writer.line(_emit("response.text", returns))

    _render_async(writer, options, body)
    return writer.render()


def render_aiohttp(request: CurlRequest, options: GenerationOptions) -> str:
    """Auth and timeout configure the ClientSession, the rest goes per request."""
    writer = _start(request, options, ["asyncio", "aiohttp"])
    session = f"async with aiohttp.ClientSession({', '.join(aiohttp_session_kwargs(request))}) as session:"
    head, args = _call_parts("session", request)
    args += aiohttp_kwargs(request)

    def body(returns: bool) -> None:
        if options.add_error_handling:
            with writer.block("try:"):
                with writer.block(session):
                    writer.call(f"async with {head}(", args, ") as response:")
                    with writer.indented():
                        writer.line("response.raise_for_status()")
                        writer.line(_emit("await response.json()", returns))
            with writer.block("except aiohttp.ClientError as e:"):
                writer.line(ERROR_MESSAGE)
        else:
            with writer.block(session):
                writer.call(f"async with {head}(", args, ") as response:")
                with writer.indented():
                    writer.line(_emit("await response.text()", returns))

    _render_async(writer, options, body)
    return writer.render()


# -- shared structure ---------------------------------------------------------

def _start(request: CurlRequest, options: GenerationOptions, modules: list[str]) -> CodeWriter:
    writer = CodeWriter()
    if options.include_imports:
        for module in modules:
            writer.line(f"import {module}")
        writer.line()
    write_preamble(writer, request)
    return writer


def _call_parts(receiver: str, request: CurlRequest,
                shortcuts: frozenset[str] = SHORTCUT_METHODS) -> tuple[str, list[str]]:
    """Return the callable expression and its leading positional arguments."""
    name = request.method.lower()
    if name in shortcuts:
        return f"{receiver}.{name}", [py_str(request.url)]
    return f"{receiver}.request", [py_str(request.method), py_str(request.url)]


def _httpx_shortcuts(request: CurlRequest) -> frozenset[str]:
    """httpx get/delete/head/options take no body, so those go through .request."""
    return HTTPX_BODY_METHODS if body_keyword(request) else SHORTCUT_METHODS


def _emit(expr: str, returns: bool) -> str:
    return f"return {expr}" if returns else f"print({expr})"


def _render_sync(writer: CodeWriter, request: CurlRequest, options: GenerationOptions, *,
                 module: str, client: str, receiver: str, error: str, kwargs: list[str],
                 shortcuts: frozenset[str] = SHORTCUT_METHODS) -> None:
    if options.use_session:
        head, args = _call_parts(receiver, request, shortcuts)
        with writer.block(f"with {client}:"):
            _sync_call(writer, head, args + kwargs, error, options.add_error_handling)
    else:
        head, args = _call_parts(module, request, shortcuts)
        _sync_call(writer, head, args + kwargs, error, options.add_error_handling)


def _sync_call(writer: CodeWriter, head: str, args: list[str], error: str, handle_errors: bool) -> None:
    if handle_errors:
        with writer.block("try:"):
            writer.call(f"response = {head}(", args)
            writer.line("response.raise_for_status()")
            writer.line("print(response.json())")
        with writer.block(f"except {error} as e:"):
            writer.line(ERROR_MESSAGE)
    else:
        writer.call(f"response = {head}(", args)
        writer.line("print(response.text)")


def _render_async(writer: CodeWriter, options: GenerationOptions, body) -> None:
    """Put the async body inside ``main()`` or leave it at top level.

    Unwrapped output awaits at module level and needs an async REPL or
    notebook to run.
    """
    if not options.wrap_async:
        body(returns=False)
        return
    with writer.block("async def main():"):
        body(returns=True)
    writer.line()
    writer.line()
    with writer.block('if __name__ == "__main__":'):
        writer.line("print(asyncio.run(main()))")
