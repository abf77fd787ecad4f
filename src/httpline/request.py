"""Data model for a parsed request."""
from __future__ import annotations

import dataclasses
import enum
import typing as t

from werkzeug.datastructures import ImmutableDict


class Method(enum.Enum):
    """Request method. Tokens other than ``GET`` and ``POST`` are kept as
    :attr:`UNRECOGNIZED` instead of being rejected.
    """

    GET = "GET"
    POST = "POST"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def _missing_(cls, value):
        return cls.UNRECOGNIZED

    @classmethod
    def classify(cls, token: str) -> Method:
        return cls(token)


class Version(enum.Enum):
    """Protocol version, with the same lenient fallback as :class:`Method`."""

    HTTP_1_1 = "HTTP/1.1"
    HTTP_2_0 = "HTTP/2.0"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def _missing_(cls, value):
        return cls.UNRECOGNIZED

    @classmethod
    def classify(cls, token: str) -> Version:
        return cls(token)


class Resource:
    """Target of a request."""

    __slots__ = ()


@dataclasses.dataclass(frozen=True)
class Path(Resource):
    """The request target exactly as it appeared on the request line."""

    value: str

    def __str__(self) -> str:
        return self.value


class HeaderMap(ImmutableDict):
    """Read-only ``name -> value`` mapping of request headers.

    Names are case-sensitive. Built once by the parser, later duplicates
    having already replaced earlier ones.
    """

    def __repr__(self) -> str:
        return f"<HeaderMap {dict.__repr__(self)}>"


@dataclasses.dataclass(frozen=True)
class ParsedRequest:
    method: Method
    version: Version
    resource: Resource
    headers: HeaderMap = dataclasses.field(default_factory=HeaderMap)
    body: str = ""

    @property
    def path(self) -> str:
        return str(self.resource)

    def to_dict(self) -> dict[str, t.Any]:
        """Return a plain, JSON-serializable copy of the request."""
        return {
            "method": self.method.value,
            "version": self.version.value,
            "path": self.path,
            "headers": dict(self.headers),
            "body": self.body,
        }
