"""Share Resolver - maps a requested share name to a local mount path."""

import logging
from typing import Dict, Optional

import aiofiles.os

from ...config import Settings
from ...models import MountRecord
from ...utils.share_names import candidate_mount_paths, hyphens_to_spaces
from ..network_mount.base_mounter import BaseMounter
from .mount_inventory import MountInventory


def match_mounted_share(mounts: Dict[str, MountRecord], share_name: str) -> Optional[str]:
    """
    Look the share up in the mount inventory.

    Order: exact key, case-insensitive key, then case-insensitive key after
    turning hyphens into spaces ("My-Share" finds "My Share").
    """
    if share_name in mounts:
        return mounts[share_name].local_path

    lower_name = share_name.lower()
    for name, mount in mounts.items():
        if name.lower() == lower_name:
            return mount.local_path

    normalized_name = hyphens_to_spaces(share_name).lower()
    for name, mount in mounts.items():
        if name.lower() == normalized_name:
            return mount.local_path

    return None


class ShareResolver:
    def __init__(self, settings: Settings, inventory: MountInventory, mounter: BaseMounter):
        self._settings = settings
        self._inventory = inventory
        self._mounter = mounter

    async def find_share_mount(self, share_name: str) -> Optional[str]:
        """Lightweight lookups only: mount inventory, then existing directories."""
        mounts = await self._inventory.get_mounted_shares()

        local_path = match_mounted_share(mounts, share_name)
        if local_path:
            logging.debug(f"Share '{share_name}' is mounted at {local_path}")
            return local_path

        for candidate in candidate_mount_paths(self._settings.nas_mount_base, share_name):
            if await aiofiles.os.path.exists(candidate):
                logging.debug(f"Share '{share_name}' found on disk at {candidate}")
                return candidate

        return None

    async def resolve(self, share_name: str) -> str:
        """Return the mount path for the share, mounting it if nothing else matches."""
        local_path = await self.find_share_mount(share_name)
        if local_path:
            return local_path

        logging.info(f"Share '{share_name}' not mounted, mounting on demand via {self._mounter.get_platform_name()}")
        return await self._mounter.mount_share(share_name)
