"""Data models for a parsed cURL command.

The parser converts raw command text into a CurlRequest, which the
code generator consumes without modification.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class BasicAuth(BaseModel):
    """Credentials from a ``user:password`` string."""

    model_config = ConfigDict(frozen=True)

    user: str
    password: str = ""


class CurlRequest(BaseModel):
    """A single HTTP request described by a cURL command.

    Headers and cookies are read-only views; copy them with ``dict()``
    to change anything.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    url: str = Field(min_length=1)
    method: str = "GET"  # uppercased, unknown verbs pass through
    headers: Mapping[str, str] = {}  # insertion order as given, never holds Cookie
    cookies: Mapping[str, str] = {}
    data: str | None = None
    auth: BasicAuth | None = None
    proxy: str | None = None  # host[:port]
    proxy_auth: str | None = None  # raw user:password
    insecure: bool = False
    timeout: float | None = None  # seconds

    @field_validator("headers", "cookies")
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("headers", "cookies")
    def _plain_dict(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)
