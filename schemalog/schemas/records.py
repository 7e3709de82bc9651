"""
Record schemas for the supported log standards.

Records are the assembled, pre-serialization representation of one log
event. They are built fresh for every formatting call and discarded
right after serialization.

Limitations:
- Optional sections are omitted from the output when empty, never written
  as null, empty string or empty object.
- Values inside ``ctx`` and ``extra`` must be JSON-serializable by pydantic.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from schemalog.schemas.standard import Standard


class ErrorInfo(BaseModel):
    """
    Rendered form of an exception.

    Attributes:
        msg: String form of the exception
        trace: Stack frames, most recent call first; empty when unavailable
    """

    msg: str
    trace: List[str] = Field(default_factory=list)


class BaseRecord(BaseModel):
    """
    Fields shared by every log record schema.

    Subclasses list the keys that must be dropped from the output when
    their value is empty in ``omit_when_empty``.
    """

    omit_when_empty: ClassVar[FrozenSet[str]] = frozenset({"service", "env"})

    schema_: Standard = Field(alias="schema")
    service: Optional[str] = None
    env: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def drop_empty_sections(self, handler):
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key not in self.omit_when_empty or value
        }

    def to_json(self) -> bytes:
        """Serialize the record as compact JSON, without a trailing newline."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


class AppLogsV1Record(BaseRecord):
    """Record for the app.logs.v1 standard."""

    omit_when_empty: ClassVar[FrozenSet[str]] = BaseRecord.omit_when_empty | {"ctx"}

    schema_: Standard = Field(default=Standard.APP_LOGS_V1, alias="schema")
    channel: str = ""
    level: str
    time: str
    msg: str = ""
    ctx: Optional[Dict[str, Any]] = None


class HTTPRequestV1Record(BaseRecord):
    """Record for the http.request.v1 standard."""

    omit_when_empty: ClassVar[FrozenSet[str]] = BaseRecord.omit_when_empty | {
        "user",
        "headers",
        "get",
        "post",
        "extra",
        "error",
    }

    schema_: Standard = Field(default=Standard.HTTP_REQUEST_V1, alias="schema")
    level: str
    time: str
    ip: str = ""
    method: str = ""
    path: str = ""
    user: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    get: Optional[Dict[str, Any]] = None
    post: Optional[Dict[str, Any]] = None
    extra: Optional[Dict[str, Any]] = None
    error: Optional[ErrorInfo] = None
