"""Errors raised while parsing a raw request."""
from werkzeug.exceptions import BadRequest


class MalformedRequestLine(BadRequest):
    """The first line did not split into method, target and version.

    This is the only hard failure of the parser. It is a ``400 Bad
    Request`` so a WSGI caller can hand it back as the response.
    """

    def __init__(self, line=None, tokens=None):
        self.line = line
        self.tokens = list(tokens) if tokens is not None else []
        if line is None:
            description = "The request is empty, no request line was found."
        else:
            description = (
                f"Malformed request line {line!r}: expected 3"
                f" space-separated tokens, got {len(self.tokens)}."
            )
        super().__init__(description)
