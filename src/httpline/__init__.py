"""httpline: parse raw HTTP/1.x requests into immutable request objects."""

__version__ = "0.1.0"

from httpline.config import Config
from httpline.exceptions import MalformedRequestLine
from httpline.parser import RequestParser, parse
from httpline.request import (
    HeaderMap,
    Method,
    ParsedRequest,
    Path,
    Resource,
    Version,
)

__all__ = [
    "__version__",
    "Config",
    "HeaderMap",
    "MalformedRequestLine",
    "Method",
    "ParsedRequest",
    "Path",
    "RequestParser",
    "Resource",
    "Version",
    "parse",
]
