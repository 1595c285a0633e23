"""Mount Inventory - NAS exports currently present in the local mount table."""

import logging
from typing import Dict

from ...config import Settings
from ...models import MountRecord
from ...utils.share_names import build_mount_pattern, strip_volume_prefix
from ..command_runner import CommandRunner, CommandTimeoutError


def parse_mount_output(output: str, host: str, volume_prefix: str) -> Dict[str, MountRecord]:
    """Parse `mount` output, keeping only entries whose device is `<host>:...`."""
    pattern = build_mount_pattern(host, volume_prefix)
    device_prefix = f"{host}:"
    mounts: Dict[str, MountRecord] = {}

    for line in output.strip().split("\n"):
        if not line.startswith(device_prefix):
            continue
        match = pattern.match(line)
        if not match:
            continue
        export_path, local_path = match.group(1), match.group(2)
        share_name = strip_volume_prefix(export_path, volume_prefix)
        mounts[share_name] = MountRecord(
            export_path=export_path,
            local_path=local_path,
            share_name=share_name,
        )
    return mounts


class MountInventory:
    """
    Reads the OS mount table on every call.

    A failed or empty query is not an error: the NAS may simply have
    nothing mounted, so an empty mapping is returned.
    """

    def __init__(self, settings: Settings, runner: CommandRunner):
        self._settings = settings
        self._runner = runner

    async def get_mounted_shares(self) -> Dict[str, MountRecord]:
        try:
            result = await self._runner.run(["mount"])
        except (OSError, CommandTimeoutError) as e:
            logging.warning(f"Could not read mount table: {e}")
            return {}

        if not result.ok:
            logging.warning(f"Could not read mount table: {result.error_message}")
            return {}

        mounts = parse_mount_output(
            result.stdout, self._settings.nas_ip, self._settings.nas_volume_prefix
        )
        logging.debug(f"Found {len(mounts)} mounted shares from {self._settings.nas_ip}")
        return mounts
