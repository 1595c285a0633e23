"""
Tests for Settings loading.
"""

import pytest

from save_to_nas.config import Settings


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for var in ("NAS_IP", "NAS_MOUNT_BASE", "NAS_VOLUME_PREFIX", "PORT"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.nas_ip == "10.0.0.50"
        assert settings.nas_mount_base == "/mnt/nas"
        assert settings.nas_volume_prefix == "/volume1"
        assert settings.port == 3847
        assert settings.nas_preserve_attributes is True
        assert settings.nas_command_timeout_seconds is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NAS_IP", "192.168.1.20")
        monkeypatch.setenv("NAS_MOUNT_BASE", "/media/nas")
        monkeypatch.setenv("NAS_VOLUME_PREFIX", "/volume2")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("NAS_PRESERVE_ATTRIBUTES", "false")

        settings = Settings(_env_file=None)

        assert settings.nas_ip == "192.168.1.20"
        assert settings.nas_mount_base == "/media/nas"
        assert settings.nas_volume_prefix == "/volume2"
        assert settings.port == 9000
        assert settings.nas_preserve_attributes is False

    def test_settings_are_immutable(self):
        settings = Settings(_env_file=None)

        with pytest.raises(Exception):
            settings.nas_ip = "1.2.3.4"

    def test_log_directory_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("LOG_FILE_PATH", raising=False)

        assert Settings(_env_file=None).log_directory is None

    def test_log_directory(self):
        settings = Settings(_env_file=None, log_file_path="logs/nas.log")

        assert str(settings.log_directory) == "logs"
