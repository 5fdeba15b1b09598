"""
Request and response types.

``RequestConfig`` describes one call declaratively. ``Success`` and
``Failure`` form the normalized ``Response`` union returned to callers.
The wire envelope and the refresh payload are validated with pydantic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from ..constants import FALLBACK_ERROR_MESSAGE

T = TypeVar("T")

PathValue = Union[str, int]


@dataclass
class RequestConfig:
    """Declarative description of one call.

    Attributes:
        url: URL template, relative to the base URL, with ``{name}`` placeholders
        method: HTTP method
        path_variables: Placeholder name to substitution value
        params: Query parameters
        json: JSON body
        data: Form or raw body
        headers: Extra headers for this call
        timeout: Per-call timeout in seconds, overriding the client default
        ignore_auth: Do not attach the bearer token
        silent_error: Do not report failures to the error handler
        throw_error: Raise failures instead of returning a Failure
        retried: Set once the call has been re-issued after a token refresh
    """

    url: str
    method: str = "GET"
    path_variables: Optional[Mapping[str, PathValue]] = None
    params: Optional[Mapping[str, Any]] = None
    json: Any = None
    data: Any = None
    headers: Optional[Dict[str, str]] = None
    timeout: Optional[float] = None
    ignore_auth: bool = False
    silent_error: bool = False
    throw_error: bool = False
    retried: bool = field(default=False, repr=False)

    def __post_init__(self):
        self.method = self.method.upper()


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful call; ``data`` is the envelope payload."""

    data: T
    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Failure:
    """Failed call, reported and converted to data."""

    error_code: int
    error_message: str
    success: bool = field(default=False, init=False)

    def __post_init__(self):
        if not self.error_message:
            object.__setattr__(self, "error_message", FALLBACK_ERROR_MESSAGE)


Response = Union[Success[Any], Failure]


class ApiEnvelope(BaseModel):
    """The ``{success, data, errorCode, errorMessage}`` body every endpoint returns."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    success: bool
    data: Any = None
    error_code: Optional[Union[int, str]] = Field(None, alias="errorCode")
    error_message: Optional[str] = Field(None, alias="errorMessage")


class RefreshTokens(BaseModel):
    """Payload of a successful refresh call."""

    access: str = Field(min_length=1)
    refresh: str = Field(min_length=1)
