from functools import lru_cache
from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from .config import Settings
from .server import create_mcp_server
from .services.command_runner import CommandRunner
from .services.copy.file_copier import FileCopier
from .services.nas.export_discovery import ExportDiscovery
from .services.nas.mount_inventory import MountInventory
from .services.nas.share_resolver import ShareResolver
from .services.nas_share_service import NasShareService
from .services.network_mount.nfs_mounter import NfsMounter

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Hent Settings singleton instance."""
    return Settings()


def get_command_runner() -> CommandRunner:
    if "command_runner" not in _singletons:
        settings = get_settings()
        _singletons["command_runner"] = CommandRunner(
            timeout_seconds=settings.nas_command_timeout_seconds
        )
    return _singletons["command_runner"]


def get_export_discovery() -> ExportDiscovery:
    if "export_discovery" not in _singletons:
        _singletons["export_discovery"] = ExportDiscovery(
            get_settings(), get_command_runner()
        )
    return _singletons["export_discovery"]


def get_mount_inventory() -> MountInventory:
    if "mount_inventory" not in _singletons:
        _singletons["mount_inventory"] = MountInventory(
            get_settings(), get_command_runner()
        )
    return _singletons["mount_inventory"]


def get_mounter() -> NfsMounter:
    if "mounter" not in _singletons:
        _singletons["mounter"] = NfsMounter(
            get_settings(), get_export_discovery(), get_command_runner()
        )
    return _singletons["mounter"]


def get_share_resolver() -> ShareResolver:
    if "share_resolver" not in _singletons:
        _singletons["share_resolver"] = ShareResolver(
            get_settings(), get_mount_inventory(), get_mounter()
        )
    return _singletons["share_resolver"]


def get_file_copier() -> FileCopier:
    if "file_copier" not in _singletons:
        settings = get_settings()
        _singletons["file_copier"] = FileCopier(
            get_command_runner(), preserve_attributes=settings.nas_preserve_attributes
        )
    return _singletons["file_copier"]


def get_nas_share_service() -> NasShareService:
    if "nas_share_service" not in _singletons:
        _singletons["nas_share_service"] = NasShareService(
            settings=get_settings(),
            discovery=get_export_discovery(),
            inventory=get_mount_inventory(),
            resolver=get_share_resolver(),
            copier=get_file_copier(),
        )
    return _singletons["nas_share_service"]


def get_mcp_server() -> FastMCP:
    if "mcp_server" not in _singletons:
        _singletons["mcp_server"] = create_mcp_server(get_settings(), get_nas_share_service())
    return _singletons["mcp_server"]


def reset_singletons() -> None:
    _singletons.clear()
    get_settings.cache_clear()
