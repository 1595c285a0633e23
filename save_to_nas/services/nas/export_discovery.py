"""Export Discovery - lists the NFS exports offered by the NAS."""

import logging
from typing import List

from ...config import Settings
from ...core.exceptions import DiscoveryError
from ...models import ExportRecord
from ...utils.share_names import build_export_pattern, strip_volume_prefix, to_local_name
from ..command_runner import CommandRunner, CommandTimeoutError


def parse_showmount_output(output: str, volume_prefix: str) -> List[ExportRecord]:
    """
    Parse `showmount -e` output into export records.

    The first line is the "Export list for <host>:" header. Remaining lines
    that do not start with `<volume_prefix>/` are dropped.
    """
    pattern = build_export_pattern(volume_prefix)
    records: List[ExportRecord] = []

    for line in output.strip().split("\n")[1:]:
        match = pattern.match(line)
        if not match:
            continue
        export_path = match.group(1)
        share_name = strip_volume_prefix(export_path, volume_prefix)
        records.append(
            ExportRecord(
                export_path=export_path,
                share_name=share_name,
                local_name=to_local_name(share_name),
            )
        )
    return records


class ExportDiscovery:
    def __init__(self, settings: Settings, runner: CommandRunner):
        self._settings = settings
        self._runner = runner

    async def discover(self) -> List[ExportRecord]:
        """Query the NAS for its exports. Raises DiscoveryError if the query fails."""
        try:
            result = await self._runner.run(["showmount", "-e", self._settings.nas_ip])
        except (OSError, CommandTimeoutError) as e:
            logging.error(f"showmount failed for {self._settings.nas_ip}: {e}")
            raise DiscoveryError(str(e)) from e

        if not result.ok:
            logging.error(
                f"showmount failed for {self._settings.nas_ip}: {result.error_message}"
            )
            raise DiscoveryError(result.error_message)

        exports = parse_showmount_output(result.stdout, self._settings.nas_volume_prefix)
        logging.debug(f"Discovered {len(exports)} exports on {self._settings.nas_ip}")
        return exports
