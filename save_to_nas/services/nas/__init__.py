"""
NAS share services: export discovery, mount inventory and share resolution.
"""

from .export_discovery import ExportDiscovery, parse_showmount_output
from .mount_inventory import MountInventory, parse_mount_output
from .share_resolver import ShareResolver, match_mounted_share

__all__ = [
    "ExportDiscovery",
    "parse_showmount_output",
    "MountInventory",
    "parse_mount_output",
    "ShareResolver",
    "match_mounted_share",
]
