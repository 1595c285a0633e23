from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # NAS forbindelse
    nas_ip: str = "10.0.0.50"
    nas_mount_base: str = "/mnt/nas"
    nas_volume_prefix: str = "/volume1"
    nas_fs_type: str = "nfs"

    # Privileged mkdir/mount steps are prefixed with sudo
    nas_use_sudo: bool = True

    # cp -p unless disabled
    nas_preserve_attributes: bool = True

    # None = block until the external command finishes
    nas_command_timeout_seconds: Optional[float] = None

    # Network transport (only used by the http variant)
    host: str = "0.0.0.0"
    port: int = 3847

    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = ""  # Empty disables the rotating file handler
    log_retention_days: int = 30

    model_config = SettingsConfigDict(
        env_file="settings.env",
        extra="ignore",
        frozen=True,
    )

    @property
    def log_directory(self) -> Optional[Path]:
        """Returnerer log directory som Path objekt, or None when file logging is off"""
        if not self.log_file_path:
            return None
        return Path(self.log_file_path).parent

    @property
    def summary(self) -> dict:
        """NAS connection details safe to expose to clients."""
        return {
            "nas_ip": self.nas_ip,
            "mount_base": self.nas_mount_base,
            "volume_prefix": self.nas_volume_prefix,
            "fs_type": self.nas_fs_type,
        }
