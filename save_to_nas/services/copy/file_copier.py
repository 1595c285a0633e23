"""File Copier - copies a local file or folder onto a mounted share with cp."""

import logging
import os
from typing import List, Optional

import aiofiles.os

from ...core.exceptions import CopyError, SourceNotFoundError
from ..command_runner import CommandRunner, CommandTimeoutError
from .models import CopyResult


class FileCopier:
    def __init__(self, runner: CommandRunner, preserve_attributes: bool = True):
        self._runner = runner
        self._preserve_attributes = preserve_attributes

    def build_copy_command(
        self,
        source: str,
        destination: str,
        is_directory: bool,
        recursive: bool = True,
        preserve_attributes: Optional[bool] = None,
    ) -> List[str]:
        if preserve_attributes is None:
            preserve_attributes = self._preserve_attributes

        cmd = ["cp"]
        if recursive and is_directory:
            cmd.append("-r")
        if preserve_attributes:
            cmd.append("-p")
        cmd.extend([source, destination])
        return cmd

    async def copy(
        self,
        source_path: str,
        dest_path: str,
        recursive: bool = True,
        preserve_attributes: Optional[bool] = None,
    ) -> CopyResult:
        """
        Copy source_path to dest_path as a single cp invocation.

        Raises SourceNotFoundError before running anything if the source is
        missing, and CopyError if cp fails.
        """
        resolved_source = os.path.abspath(source_path)

        if not await aiofiles.os.path.exists(resolved_source):
            raise SourceNotFoundError(resolved_source)

        is_directory = await aiofiles.os.path.isdir(resolved_source)
        cmd = self.build_copy_command(
            resolved_source, dest_path, is_directory, recursive, preserve_attributes
        )

        logging.info(f"Copying {resolved_source} -> {dest_path}")
        try:
            result = await self._runner.run(cmd)
        except (OSError, CommandTimeoutError) as e:
            logging.error(f"Copy failed for {resolved_source}: {e}")
            raise CopyError(str(e)) from e

        if not result.ok:
            logging.error(f"Copy failed for {resolved_source}: {result.error_message}")
            raise CopyError(result.error_message)

        copy_result = CopyResult(
            success=True,
            source=resolved_source,
            destination=dest_path,
            is_directory=is_directory,
        )
        logging.info(copy_result.get_summary())
        return copy_result
