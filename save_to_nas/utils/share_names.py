import os
import re
from typing import List, Pattern


def strip_volume_prefix(export_path: str, volume_prefix: str) -> str:
    prefix = f"{volume_prefix}/"
    if export_path.startswith(prefix):
        return export_path[len(prefix):]
    return export_path


def to_local_name(share_name: str) -> str:
    return share_name.replace(" ", "-")


def hyphens_to_spaces(share_name: str) -> str:
    return share_name.replace("-", " ")


def join_under(base: str, name: str) -> str:
    # Absolute names stay under base instead of replacing it
    return os.path.normpath(f"{base}/{name}")


def candidate_mount_paths(mount_base: str, share_name: str) -> List[str]:
    return [
        join_under(mount_base, share_name),
        join_under(mount_base, to_local_name(share_name)),
        join_under(mount_base, hyphens_to_spaces(share_name)),
    ]


def build_export_pattern(volume_prefix: str) -> Pattern[str]:
    return re.compile(rf"^({re.escape(volume_prefix)}/\S+)")


def build_mount_pattern(host: str, volume_prefix: str) -> Pattern[str]:
    return re.compile(
        rf"^{re.escape(host)}:({re.escape(volume_prefix)}/\S+)\s+on\s+(\S+)"
    )
