"""Unit tests for cleanpath.api.text.unexpand_tilde module."""

import pytest

from cleanpath.api.config.CleanpathConfig import CleanpathConfig
from cleanpath.api.text.unexpand_tilde import unexpand_tilde

pytestmark = pytest.mark.text


def make_config(user: str = "", resolved_user: str = "me", home: str = "/home/me") -> CleanpathConfig:
    return CleanpathConfig(tilde_unexpand=True, user=user, resolved_home=home, resolved_user=resolved_user)


class TestUnexpandTilde:
    """Test unexpand_tilde function."""

    def test_home_prefix(self):
        """Test the home prefix becomes '~'."""
        assert unexpand_tilde("/home/me/docs", make_config()) == "~/docs"

    def test_home_itself(self):
        """Test the home directory alone becomes '~'."""
        assert unexpand_tilde("/home/me", make_config()) == "~"

    def test_partial_segment_unchanged(self):
        """Test '/home/meow' is not under '/home/me'."""
        assert unexpand_tilde("/home/meow/x", make_config()) == "/home/meow/x"

    def test_outside_home_unchanged(self):
        """Test paths outside the home pass through."""
        assert unexpand_tilde("/tmp/home/me", make_config()) == "/tmp/home/me"

    def test_no_home_unchanged(self):
        """Test nothing happens without a resolved home."""
        assert unexpand_tilde("/home/me/x", make_config(home="")) == "/home/me/x"

    def test_same_user_is_bare(self):
        """Test a configured user equal to the resolved user gives bare '~'."""
        assert unexpand_tilde("/home/me/x", make_config(user="me")) == "~/x"

    def test_other_user_is_qualified(self):
        """Test a configured user differing from the resolved one qualifies the tilde."""
        assert unexpand_tilde("/home/bob/x", make_config(user="bob", resolved_user="", home="/home/bob")) == "~bob/x"

    def test_dash_user(self):
        """Test the '-' user token is carried into the prefix."""
        config = make_config(user="-", resolved_user="")
        assert unexpand_tilde("/home/me/docs", config) == "~-/docs"
