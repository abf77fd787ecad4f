"""Tests for Config and how parsers pick it up."""
import pytest

from httpline import Config, RequestParser
from httpline.config import default_config


class TestConfigBasic:
    def test_config_is_dict(self):
        assert isinstance(Config(), dict)

    def test_config_with_defaults(self):
        c = Config(default_config)
        assert c["HEADER_VALUE_POLICY"] == "rejoin"
        assert c["ENCODING"] == "iso-8859-1"
        assert c["DEBUG"] is False
        assert c["LOGGER_NAME"] == "httpline"

    def test_defaults_are_copied(self):
        c = Config(default_config)
        c["DEBUG"] = True
        assert default_config["DEBUG"] is False

    def test_repr(self):
        r = repr(Config({"DEBUG": True}))
        assert r.startswith("<Config")
        assert "DEBUG" in r


class TestConfigFromMapping:
    def test_from_dict_and_kwargs(self):
        c = Config()
        assert c.from_mapping({"A": 1}, B=2) is True
        assert c == {"A": 1, "B": 2}

    def test_from_iterable_of_pairs(self):
        c = Config()
        c.from_mapping([("X", 10), ("Y", 20)])
        assert c == {"X": 10, "Y": 20}

    def test_overwrites(self):
        c = Config(default_config)
        c.from_mapping(ENCODING="utf-8")
        assert c["ENCODING"] == "utf-8"


class TestConfigFromPrefixedEnv:
    def test_json_values_for_non_string_settings(self, monkeypatch):
        monkeypatch.setenv("HTTPLINE_DEBUG", "true")
        c = Config(default_config)
        c.from_prefixed_env()
        assert c["DEBUG"] is True

    def test_plain_strings(self, monkeypatch):
        monkeypatch.setenv("HTTPLINE_HEADER_VALUE_POLICY", "truncate")
        c = Config(default_config)
        c.from_prefixed_env()
        assert c["HEADER_VALUE_POLICY"] == "truncate"

    @pytest.mark.parametrize("key, raw", [
        ("ENCODING", "1"),
        ("LOGGER_NAME", "123"),
        ("HEADER_VALUE_POLICY", "null"),
    ])
    def test_string_settings_are_not_decoded(self, monkeypatch, key, raw):
        monkeypatch.setenv(f"HTTPLINE_{key}", raw)
        c = Config(default_config)
        c.from_prefixed_env()
        assert c[key] == raw

    def test_unknown_keys_are_decoded(self, monkeypatch):
        monkeypatch.setenv("HTTPLINE_EXTRA", "[1, 2]")
        c = Config(default_config)
        c.from_prefixed_env()
        assert c["EXTRA"] == [1, 2]

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_ENCODING", "utf-8")
        monkeypatch.setenv("HTTPLINE_ENCODING", "ascii")
        c = Config()
        c.from_prefixed_env("MYAPP")
        assert c == {"ENCODING": "utf-8"}


class TestParserConfig:
    def test_parser_starts_from_defaults(self):
        parser = RequestParser()
        assert parser.config == default_config
        assert parser.debug is False

    def test_parser_overrides(self):
        parser = RequestParser({"DEBUG": True, "ENCODING": "utf-8"})
        assert parser.debug is True
        assert parser.config["ENCODING"] == "utf-8"
        assert parser.config["HEADER_VALUE_POLICY"] == "rejoin"

    def test_parser_accepts_config_instance(self):
        c = Config(default_config)
        c["HEADER_VALUE_POLICY"] = "truncate"
        parser = RequestParser(c)
        assert parser.config["HEADER_VALUE_POLICY"] == "truncate"
        assert parser.config is not c

    def test_bad_policy_in_config(self):
        parser = RequestParser({"HEADER_VALUE_POLICY": "bogus"})
        with pytest.raises(ValueError):
            parser.parse("GET / HTTP/1.1\r\n\r\n")

    def test_non_string_encoding_is_used_as_text(self):
        parser = RequestParser({"ENCODING": 1})
        with pytest.raises(LookupError, match="1"):
            parser.parse(b"GET / HTTP/1.1\r\n\r\n")

    def test_non_string_logger_name(self):
        parser = RequestParser({"LOGGER_NAME": 123})
        assert parser.logger.name == "123"
