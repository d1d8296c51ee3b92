"""Tests for printer configuration."""

from sourceprint.config import Config


class TestConfigFromEnv:
    """Tests for Config.from_env."""

    def test_color_enabled_by_default(self):
        """Color is on when nothing is set."""
        assert Config.from_env({}).color is True

    def test_no_color_disables_color(self):
        """Any non-empty NO_COLOR turns color off."""
        assert Config.from_env({"NO_COLOR": "1"}).color is False

    def test_empty_no_color_is_ignored(self):
        """An empty NO_COLOR leaves color on."""
        assert Config.from_env({"NO_COLOR": ""}).color is True

    def test_explicit_setting_overrides_no_color(self):
        """SOURCEPRINT_COLOR=1 wins over NO_COLOR."""
        config = Config.from_env({"NO_COLOR": "1", "SOURCEPRINT_COLOR": "1"})

        assert config.color is True

    def test_explicit_setting_disables_color(self):
        assert Config.from_env({"SOURCEPRINT_COLOR": "0"}).color is False

    def test_default_callee_names(self):
        """The printer is recognized bare and qualified by package name."""
        config = Config()

        assert config.callee_names == {"D", "sourceprint.D"}
