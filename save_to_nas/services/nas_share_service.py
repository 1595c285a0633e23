"""NAS Share Service - composes discovery, resolution and copy into list/save."""

import logging
import os
from typing import Optional

import aiofiles.os

from ..config import Settings
from ..core.exceptions import CopyError, ValidationError
from ..models import SaveResult, ShareListResult, ShareStatus
from ..utils.share_names import join_under
from .copy.file_copier import FileCopier
from .nas.export_discovery import ExportDiscovery
from .nas.mount_inventory import MountInventory
from .nas.share_resolver import ShareResolver


class NasShareService:
    """Orchestrates the list and save operations. Holds no state between calls."""

    def __init__(
        self,
        settings: Settings,
        discovery: ExportDiscovery,
        inventory: MountInventory,
        resolver: ShareResolver,
        copier: FileCopier,
    ):
        self._settings = settings
        self._discovery = discovery
        self._inventory = inventory
        self._resolver = resolver
        self._copier = copier

    async def list_shares(self, name_filter: Optional[str] = None) -> ShareListResult:
        exports = await self._discovery.discover()
        mounts = await self._inventory.get_mounted_shares()

        shares = []
        for export in exports:
            mount = mounts.get(export.share_name)
            shares.append(
                ShareStatus(
                    name=export.share_name,
                    export_path=export.export_path,
                    mounted=mount is not None,
                    local_path=mount.local_path if mount else None,
                )
            )

        if name_filter:
            filter_lower = name_filter.lower()
            shares = [s for s in shares if filter_lower in s.name.lower()]

        return ShareListResult(
            nas_ip=self._settings.nas_ip,
            total_shares=len(shares),
            mounted_shares=sum(1 for s in shares if s.mounted),
            shares=shares,
        )

    async def save(
        self,
        source: Optional[str],
        share: Optional[str],
        destination_subfolder: Optional[str] = None,
    ) -> SaveResult:
        if not source or not share:
            raise ValidationError("Both 'source' and 'share' are required for save action")

        mount_path = await self._resolver.resolve(share)

        dest_dir = mount_path
        if destination_subfolder:
            dest_dir = join_under(mount_path, destination_subfolder)
            if not await aiofiles.os.path.exists(dest_dir):
                logging.info(f"Creating destination folder: {dest_dir}")
                try:
                    await aiofiles.os.makedirs(dest_dir, exist_ok=True)
                except OSError as e:
                    raise CopyError(f"Could not create destination folder {dest_dir}: {e}") from e

        source_name = os.path.basename(os.path.normpath(source))
        final_dest = os.path.join(dest_dir, source_name)

        result = await self._copier.copy(source, final_dest)

        logging.info(f"Saved {result.source} to share '{share}' at {result.destination}")
        return SaveResult(
            source=result.source,
            destination=result.destination,
            share=share,
            nas_ip=self._settings.nas_ip,
        )
