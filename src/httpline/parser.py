"""Request-line and header parser.

A buffer is consumed strictly top to bottom::

    GET /greeting HTTP/1.1      <- request line: method, target, version
    Host: localhost:3000        <- header lines, up to the first empty line
    Accept: */*
                                <- separator, never stored
    name=value                  <- body, a single line at most

Only the request line can make parsing fail. Unknown methods and versions,
header lines without a delimiter and a missing body all fall back to
lenient values.
"""
from __future__ import annotations

import typing as t

from httpline.config import Config, default_config
from httpline.exceptions import MalformedRequestLine
from httpline.request import HeaderMap, Method, ParsedRequest, Path, Version

if t.TYPE_CHECKING:
    import logging

HEADER_DELIMITER = ":"

#: ``rejoin`` keeps everything after the first delimiter
#: (``Host: localhost:3000`` -> ``localhost:3000``). ``truncate`` keeps only
#: the text between the first and second delimiter (-> ``localhost``).
HEADER_POLICIES = ("rejoin", "truncate")


def split_lines(raw: str) -> list[str]:
    """Split on ``\\n`` and drop one trailing ``\\r`` from each line.

    A terminator at the end of the buffer does not start a new line, so
    ``"a\\r\\n"`` is ``["a"]`` and ``""`` is ``[]``.
    """
    lines = raw.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_separator(line: str) -> bool:
    """The first empty line ends the header block."""
    return line == ""


class RequestParser:
    """Turns a fully read request buffer into a :class:`ParsedRequest`.

    The parser keeps no state between calls, one instance can be shared by
    any number of threads.
    """

    config_class = Config

    def __init__(self, config=None):
        self.config = self.config_class(default_config)
        if config is not None:
            self.config.from_mapping(config)
        self._logger = None

    @property
    def debug(self) -> bool:
        return bool(self.config["DEBUG"])

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            from httpline.logging import create_logger
            self._logger = create_logger(self)
        return self._logger

    def parse(
        self, raw: str | bytes, header_policy: str | None = None
    ) -> ParsedRequest:
        """Parse ``raw`` into a :class:`ParsedRequest`.

        :param raw: the whole request. ``bytes`` are decoded with the
            ``ENCODING`` config value.
        :param header_policy: overrides ``HEADER_VALUE_POLICY`` for this call.
        :raises MalformedRequestLine: the first line is missing or does not
            have exactly three space-separated tokens.
        """
        policy = header_policy or self.config["HEADER_VALUE_POLICY"]
        if policy not in HEADER_POLICIES:
            raise ValueError(
                f"Unknown header value policy {policy!r},"
                f" expected one of {', '.join(HEADER_POLICIES)}."
            )

        lines = iter(split_lines(self._decode(raw)))
        method, resource, version = self.parse_request_line(next(lines, None))
        headers = self.collect_headers(lines, policy)
        body = self.extract_body(lines)
        return ParsedRequest(
            method=method,
            version=version,
            resource=resource,
            headers=headers,
            body=body,
        )

    def _decode(self, raw):
        if isinstance(raw, str):
            return raw
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return bytes(raw).decode(str(self.config["ENCODING"]), "replace")
        raise TypeError(
            f"Expected str or bytes, got {type(raw).__name__!r} instead."
        )

    def parse_request_line(
        self, line: str | None
    ) -> tuple[Method, Path, Version]:
        if line is None:
            self.logger.debug("Empty request, no request line to parse.")
            raise MalformedRequestLine()

        tokens = line.split(" ")
        if len(tokens) != 3:
            self.logger.debug(
                "Rejecting request line %r with %d tokens.", line, len(tokens)
            )
            raise MalformedRequestLine(line, tokens)

        method_token, target, version_token = tokens
        method = Method.classify(method_token)
        if method is Method.UNRECOGNIZED:
            self.logger.debug("Unrecognized method %r.", method_token)
        version = Version.classify(version_token)
        if version is Version.UNRECOGNIZED:
            self.logger.debug("Unrecognized version %r.", version_token)
        return method, Path(target), version

    def collect_headers(
        self, lines: t.Iterator[str], policy: str = "rejoin"
    ) -> HeaderMap:
        """Consume header lines up to and including the separator."""
        headers: dict[str, str] = {}
        for line in lines:
            if is_separator(line):
                break

            parts = line.split(HEADER_DELIMITER)
            if len(parts) < 2:
                self.logger.debug(
                    "Dropping header line without %r: %r", HEADER_DELIMITER, line
                )
                continue

            key = parts[0].strip()
            if policy == "truncate":
                value = parts[1].strip()
            else:
                value = HEADER_DELIMITER.join(parts[1:]).strip()

            if key in headers:
                self.logger.debug("Header %r repeated, keeping the later value.", key)
            headers[key] = value
        return HeaderMap(headers)

    def extract_body(self, lines: t.Iterator[str]) -> str:
        """Take the line after the separator, nothing beyond it."""
        return next(lines, "")


def parse(raw: str | bytes, header_policy: str | None = None) -> ParsedRequest:
    """Parse ``raw`` with a default :class:`RequestParser`."""
    return RequestParser().parse(raw, header_policy=header_policy)
