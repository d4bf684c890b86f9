"""Unit tests for the cleanpath.api.config resolution helpers."""

import os

import pytest

from cleanpath.api.config.compile_pattern import compile_pattern
from cleanpath.api.config.ConfigError import ConfigError
from cleanpath.api.config.current_user import current_user
from cleanpath.api.config.env_order_and_values import env_order_and_values
from cleanpath.api.config.lookup_user import lookup_user
from cleanpath.api.config.lookup_user_home import lookup_user_home
from cleanpath.api.config.parse_parent_limit import parse_parent_limit
from cleanpath.api.config.resolve_user_home import resolve_user_home
from cleanpath.api.config.SystemContext import SystemContext

pytestmark = pytest.mark.config


class TestParseParentLimit:
    """Test parse_parent_limit function."""

    @pytest.mark.parametrize(("raw", "expected"), [("0", (0, False)), ("12", (12, False)), ("+2", (2, False))])
    def test_integers(self, raw, expected):
        assert parse_parent_limit(raw) == expected

    def test_unlimited(self):
        assert parse_parent_limit("-") == (0, True)

    @pytest.mark.parametrize("raw", ["-3", "x", "--", "٣"])
    def test_invalid(self, raw):
        with pytest.raises(ConfigError):
            parse_parent_limit(raw)


class TestEnvOrderAndValues:
    """Test env_order_and_values function."""

    ENV = {"Z": "1", "A": "2"}

    def test_all_when_expanding_without_names(self):
        assert env_order_and_values([], True, self.ENV) == (("Z", "A"), {"Z": "1", "A": "2"})

    def test_none_when_unexpanding_without_names(self):
        assert env_order_and_values([], False, self.ENV) == ((), {})

    def test_marker_selects_all(self):
        assert env_order_and_values(["-"], False, self.ENV)[0] == ("Z", "A")

    def test_names_as_given(self):
        assert env_order_and_values(["A", "Q"], True, self.ENV) == (("A", "Q"), {"A": "2", "Q": ""})


class TestCompilePattern:
    """Test compile_pattern function."""

    def test_valid(self):
        regex = compile_pattern(r"(a)a+", r"\1")
        assert regex.sub(r"\1", "caaa") == "ca"

    def test_bad_pattern(self):
        with pytest.raises(ConfigError, match="invalid -o pattern"):
            compile_pattern("[", "x")

    def test_bad_group_reference(self):
        with pytest.raises(ConfigError, match="invalid -n replacement"):
            compile_pattern("a", r"\1")

    def test_unknown_group_name(self):
        with pytest.raises(ConfigError, match="invalid -n replacement"):
            compile_pattern("(?P<x>a)", r"\g<y>")


class TestUserLookup:
    """Test user resolution helpers."""

    def test_resolve_user_home_current(self, fake_context):
        assert resolve_user_home("", fake_context) == ("/home/me", "me")

    def test_resolve_user_home_named(self, fake_context):
        assert resolve_user_home("bob", fake_context) == ("/home/bob", "bob")

    def test_resolve_user_home_unknown(self, fake_context):
        assert resolve_user_home("ghost", fake_context) == ("/home/me", "")

    def test_lookup_unknown_user(self):
        assert lookup_user("no_such_user_cleanpath") is None
        assert lookup_user_home("no_such_user_cleanpath") is None

    def test_current_user_matches_password_database(self):
        record = current_user()
        found = lookup_user(record.name)
        if found is not None:
            assert found.home == record.home

    def test_current_user_falls_back_to_environment(self, monkeypatch):
        def missing(_uid):
            raise KeyError(_uid)

        monkeypatch.setattr("pwd.getpwuid", missing)
        monkeypatch.setenv("USER", "envuser")
        monkeypatch.setenv("HOME", "/env/home")

        assert current_user() == ("envuser", "/env/home")

    def test_system_context_from_os_snapshots_environment(self, monkeypatch):
        monkeypatch.setenv("CLEANPATH_SNAPSHOT", "before")
        context = SystemContext.from_os()
        monkeypatch.setenv("CLEANPATH_SNAPSHOT", "after")

        assert context.environ["CLEANPATH_SNAPSHOT"] == "before"
        assert context.getcwd() == os.getcwd()
