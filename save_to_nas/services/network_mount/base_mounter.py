"""Abstract Base Mounter - interface for mount-on-demand implementations."""

from abc import ABC, abstractmethod


class BaseMounter(ABC):
    """Abstract base class for platform-specific mount operations."""

    @abstractmethod
    async def mount_share(self, share_name: str) -> str:
        """Mount the named share and return its local mount point."""
        pass

    @abstractmethod
    def get_platform_name(self) -> str:
        """Get platform name for logging."""
        pass
