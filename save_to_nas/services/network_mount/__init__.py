"""
Network Mount Module

Mount-on-demand for NAS shares:
- BaseMounter: Abstract interface for mount operations
- NfsMounter: mkdir + `mount -t nfs` implementation
"""

from .base_mounter import BaseMounter
from .nfs_mounter import NfsMounter, find_export

__all__ = [
    "BaseMounter",
    "NfsMounter",
    "find_export",
]
