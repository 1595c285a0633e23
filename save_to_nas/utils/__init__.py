"""
Utilities package for Save-to-NAS.

Pure functions for share name handling and command output patterns.
"""

from .share_names import (
    strip_volume_prefix,
    to_local_name,
    hyphens_to_spaces,
    join_under,
    candidate_mount_paths,
    build_export_pattern,
    build_mount_pattern,
)

__all__ = [
    "strip_volume_prefix",
    "to_local_name",
    "hyphens_to_spaces",
    "join_under",
    "candidate_mount_paths",
    "build_export_pattern",
    "build_mount_pattern",
]
