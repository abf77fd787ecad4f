"""Parser configuration."""
import json
import os

#: Defaults every :class:`~httpline.parser.RequestParser` starts from.
default_config = {
    "HEADER_VALUE_POLICY": "rejoin",
    "ENCODING": "iso-8859-1",
    "DEBUG": False,
    "LOGGER_NAME": "httpline",
}


class Config(dict):
    """Parser settings, keyed by uppercase names."""

    def __init__(self, defaults=None):
        super().__init__(defaults or {})

    def from_mapping(self, mapping=None, **kwargs):
        """Update from a mapping, an iterable of pairs, or keyword arguments."""
        if mapping is not None:
            pairs = mapping.items() if hasattr(mapping, "items") else mapping
            self.update(pairs)
        self.update(kwargs)
        return True

    def from_prefixed_env(self, prefix="HTTPLINE", loads=json.loads):
        """Load environment variables starting with ``{prefix}_``.

        Settings whose current value is a string (``ENCODING``,
        ``LOGGER_NAME``, ``HEADER_VALUE_POLICY``) take the variable as is,
        so ``HTTPLINE_ENCODING=1`` stays ``"1"``. Other settings go through
        ``loads`` and fall back to the raw string: ``HTTPLINE_DEBUG=true``
        sets ``DEBUG`` to ``True``.
        """
        prefix = f"{prefix}_"
        for name, value in os.environ.items():
            if not name.startswith(prefix):
                continue
            key = name[len(prefix):]
            if not isinstance(self.get(key), str):
                try:
                    value = loads(value)
                except ValueError:
                    pass
            self[key] = value
        return True

    def __repr__(self):
        return f"<{type(self).__name__} {dict.__repr__(self)}>"
