"""Code generation options.

Every field is required: the renderer never fills in defaults, callers
(the CLI, or a config file) resolve them first.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Library(str, Enum):
    """Target HTTP client library and call style."""

    REQUESTS = "requests"  # synchronous, optional Session
    HTTPX_SYNC = "httpx_sync"  # synchronous, optional Client
    HTTPX_ASYNC = "httpx_async"  # awaited AsyncClient
    AIOHTTP = "aiohttp"  # ClientSession on the event loop

    @property
    def is_async(self) -> bool:
        return self in (Library.HTTPX_ASYNC, Library.AIOHTTP)


class GenerationOptions(BaseModel):
    """Caller-supplied switches that shape the generated code."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    library: Library
    include_imports: bool
    wrap_async: bool  # only read by async libraries
    add_error_handling: bool
    use_session: bool


def default_filename(library: Library) -> str:
    """File name offered when saving generated code, e.g. ``request-httpx-sync.py``."""
    return f"request-{library.value.replace('_', '-')}.py"
