"""NFS Mounter - mounts NAS exports on demand."""

import logging
from typing import List, Optional

import aiofiles.os

from ...config import Settings
from ...core.exceptions import MountError, ShareNotFoundError
from ...models import ExportRecord
from ...utils.share_names import join_under
from ..command_runner import CommandRunner, CommandTimeoutError
from ..nas.export_discovery import ExportDiscovery
from .base_mounter import BaseMounter


def find_export(exports: List[ExportRecord], share_name: str) -> Optional[ExportRecord]:
    """Case-insensitive lookup by share name or hyphenated local name."""
    wanted = share_name.lower()
    for export in exports:
        if export.share_name.lower() == wanted or export.local_name.lower() == wanted:
            return export
    return None


class NfsMounter(BaseMounter):
    """
    Mounts `<host>:<export>` at `<mount_base>/<local_name>`.

    Each call re-runs discovery; concurrent calls for the same share are
    not coordinated and may both issue a mount.
    """

    def __init__(self, settings: Settings, discovery: ExportDiscovery, runner: CommandRunner):
        self._settings = settings
        self._discovery = discovery
        self._runner = runner

    async def mount_share(self, share_name: str) -> str:
        exports = await self._discovery.discover()
        share = find_export(exports, share_name)
        if share is None:
            logging.warning(f"Share '{share_name}' not found among {len(exports)} exports")
            raise ShareNotFoundError(share_name)

        mount_point = join_under(self._settings.nas_mount_base, share.local_name)

        if not await aiofiles.os.path.exists(mount_point):
            logging.info(f"Creating mount point: {mount_point}")
            await self._run_privileged(["mkdir", "-p", mount_point])

        device = f"{self._settings.nas_ip}:{share.export_path}"
        logging.info(f"Attempting NFS mount: {device} -> {mount_point}")
        await self._run_privileged(
            ["mount", "-t", self._settings.nas_fs_type, device, mount_point]
        )

        logging.info(f"Successfully mounted {device} at {mount_point}")
        return mount_point

    async def _run_privileged(self, args: List[str]) -> None:
        try:
            result = await self._runner.run_privileged(args, use_sudo=self._settings.nas_use_sudo)
        except (OSError, CommandTimeoutError) as e:
            logging.error(f"Mount step {args[0]} failed: {e}")
            raise MountError(str(e)) from e

        if not result.ok:
            logging.error(f"Mount step {args[0]} failed: {result.error_message}")
            raise MountError(result.error_message)

    def get_platform_name(self) -> str:
        return "NFS"
