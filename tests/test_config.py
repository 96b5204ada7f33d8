"""Tests for the utfgrid.config module."""

from unittest.mock import MagicMock, patch

from utfgrid import config


class TestGet:
    """Tests for the config.get helper."""

    @patch.object(config, 'settings')
    def test_falls_back_to_defaults(self, mock_settings):
        """get should return package defaults for unset keys."""
        mock_settings.get = MagicMock(side_effect=lambda key, default=None: default)

        assert config.get("resolution") == 4
        assert config.get("width") == 256
        assert config.get("height") == 256

    @patch.object(config, 'settings')
    def test_settings_override_defaults(self, mock_settings):
        mock_settings.get = MagicMock(side_effect=lambda key, default=None: {
            "resolution": 8,
        }.get(key, default))

        assert config.get("resolution") == 8

    @patch.object(config, 'settings')
    def test_unknown_key_uses_default_argument(self, mock_settings):
        mock_settings.get = MagicMock(side_effect=lambda key, default=None: default)

        assert config.get("fields") is None
        assert config.get("fields", ["name"]) == ["name"]


class TestChangeEnv:
    """Tests for the change_env function."""

    @patch.object(config, 'settings')
    def test_switches_and_reloads(self, mock_settings):
        config.change_env("production")

        mock_settings.setenv.assert_called_once_with("production")
        mock_settings.reload.assert_called_once()


class TestSettingsFiles:
    """Tests for the settings file search path."""

    def test_user_file_has_priority_over_global(self):
        names = [str(p) for p in config.settings_files]
        assert names.index(str(config.GLOB_DIR / "settings.toml")) < \
            names.index(str(config.USER_DIR / "settings.toml"))

    def test_current_dir_is_searched(self):
        assert config.CURR_DIR / "settings.toml" in config.settings_files
