"""
HTTP request snapshots for request logging.

The http.request.v1 formatter works on an immutable snapshot of the
request rather than on a live framework object. A snapshot can be built
directly or taken from a Starlette/FastAPI request.

Limitations:
- Reading the form of a Starlette request is asynchronous, so the form
  has to be passed to from_starlette explicitly.
- Uploaded files in a form are recorded by file name only.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from starlette.datastructures import FormData, QueryParams, UploadFile
from starlette.requests import Request

Pairs = List[Tuple[str, str]]


def canonical_header_key(name: str) -> str:
    """
    Canonicalize a header name, e.g. "x-test" becomes "X-Test".

    Args:
        name: Header name in any case

    Returns:
        The name with the first letter and each letter after a hyphen
        upper-cased and every other letter lower-cased
    """
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def split_host(remote_addr: str) -> str:
    """
    Strip the port from a remote address.

    Handles "host:port", "[ipv6]:port", a bare host and a bare IPv6
    literal.

    Args:
        remote_addr: Remote address as reported by the server

    Returns:
        The host part of the address
    """
    if remote_addr.startswith("["):
        end = remote_addr.find("]")
        if end != -1:
            return remote_addr[1:end]
    if remote_addr.count(":") == 1:
        return remote_addr.split(":", 1)[0]
    return remote_addr


def collapse_multi(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """
    Group name/value pairs by name.

    A name seen once maps to its value, a name seen several times maps
    to the list of its values in order.
    """
    grouped: Dict[str, List[str]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}


def _to_pairs(value: Any) -> Pairs:
    if value is None:
        return []
    if isinstance(value, Mapping):
        pairs: Pairs = []
        for key, item in value.items():
            if isinstance(item, (list, tuple)):
                pairs.extend((str(key), str(v)) for v in item)
            else:
                pairs.append((str(key), str(item)))
        return pairs
    return [(str(key), str(item)) for key, item in value]


class HTTPRequest(BaseModel):
    """
    Snapshot of an HTTP request.

    Attributes:
        method: HTTP method
        path: URL path, without the query string
        query_string: Raw query string, without the leading "?"
        remote_addr: Client address, usually "host:port"
        headers: Header name/value pairs; repeated names are allowed
        form: Posted form name/value pairs, or None when not parsed

    Headers and form accept a list of pairs or a mapping whose values are
    strings or lists of strings.

    Example:
        ```python
        req = HTTPRequest(
            method="GET",
            path="/test",
            query_string="foo=bar",
            remote_addr="1.2.3.4:1234",
            headers={"x-test": "1"},
        )
        ```
    """

    method: str
    path: str
    query_string: str = ""
    remote_addr: str = ""
    headers: Pairs = Field(default_factory=list)
    form: Optional[Pairs] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("headers", mode="before")
    def normalize_headers(cls, value):
        return _to_pairs(value)

    @field_validator("form", mode="before")
    def normalize_form(cls, value):
        if value is None:
            return None
        return _to_pairs(value)

    @field_validator("query_string", mode="before")
    def strip_question_mark(cls, value):
        if isinstance(value, str) and value.startswith("?"):
            return value[1:]
        return value

    @property
    def client_ip(self) -> str:
        """Client address without the port."""
        return split_host(self.remote_addr)

    def folded_headers(self) -> Dict[str, str]:
        """
        Headers keyed by canonical name.

        Returns:
            Mapping from header name to its value; values of a repeated
            header are joined with ", "
        """
        grouped: Dict[str, List[str]] = {}
        for name, value in self.headers:
            grouped.setdefault(canonical_header_key(name), []).append(value)
        return {name: ", ".join(values) for name, values in grouped.items()}

    def query_params(self) -> Dict[str, Any]:
        """Query parameters; repeated parameters are kept as a list."""
        if not self.query_string:
            return {}
        return collapse_multi(QueryParams(self.query_string).multi_items())

    def form_params(self) -> Dict[str, Any]:
        """Posted form values; repeated fields are kept as a list."""
        if not self.form:
            return {}
        return collapse_multi(self.form)

    @classmethod
    def from_starlette(
        cls, request: Request, form: Optional[Union[FormData, Mapping[str, Any]]] = None
    ) -> "HTTPRequest":
        """
        Take a snapshot of a Starlette or FastAPI request.

        Args:
            request: The incoming request
            form: Form data already read with ``await request.form()``

        Returns:
            HTTPRequest describing the request
        """
        remote_addr = ""
        if request.client is not None:
            host, port = request.client.host, request.client.port
            if ":" in host:
                host = f"[{host}]"
            remote_addr = f"{host}:{port}" if port else host

        if isinstance(form, FormData):
            form = [
                (key, (value.filename or "") if isinstance(value, UploadFile) else value)
                for key, value in form.multi_items()
            ]

        return cls(
            method=request.method,
            path=request.url.path,
            query_string=request.url.query,
            remote_addr=remote_addr,
            headers=request.headers.items(),
            form=form,
        )
