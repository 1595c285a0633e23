"""
MCP tool surface for Save-to-NAS.

Exposes a single `nas` tool with two actions:
- list: shows the exports of the NAS and which ones are mounted locally
- save: copies a local file/folder onto a share, mounting it on demand
"""

import json
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from .config import Settings
from .core.exceptions import NasError, ValidationError
from .services.nas_share_service import NasShareService


async def handle_nas_action(
    service: NasShareService,
    action: str,
    source: Optional[str] = None,
    share: Optional[str] = None,
    destination_subfolder: Optional[str] = None,
    name_filter: Optional[str] = None,
) -> str:
    """Run one action and return its result as pretty-printed JSON."""
    if action == "list":
        result = await service.list_shares(name_filter)
    elif action == "save":
        result = await service.save(source, share, destination_subfolder)
    else:
        raise ValidationError(f"Unknown action: {action}")

    return json.dumps(result.model_dump(by_alias=True), indent=2)


def create_mcp_server(settings: Settings, service: NasShareService) -> FastMCP:
    mcp = FastMCP("save-to-nas", host=settings.host, port=settings.port)

    @mcp.tool(
        name="nas",
        description=(
            f"Interact with the NAS at {settings.nas_ip}. "
            "Supports listing available shares and saving files/folders."
        ),
    )
    async def nas(
        # Plain str so an unsupported action reaches handle_nas_action
        action: str = Field(
            description="Action to perform: 'list' shows available shares, 'save' copies files to NAS",
            json_schema_extra={"enum": ["list", "save"]},
        ),
        source: Optional[str] = Field(
            default=None,
            description="Path to local file/folder to save (required for 'save' action)",
        ),
        share: Optional[str] = Field(
            default=None,
            description="Name of the NAS share (required for 'save' action, e.g., 'Documents', 'AI_Art')",
        ),
        destination_subfolder: Optional[str] = Field(
            default=None,
            description="Optional subfolder within the share to save to",
        ),
        filter: Optional[str] = Field(
            default=None,
            description="Optional filter for 'list' action to search shares by name",
        ),
    ) -> str:
        try:
            return await handle_nas_action(
                service, action, source, share, destination_subfolder, filter
            )
        except NasError as e:
            logging.warning(f"nas {action} failed: {e}")
            raise ToolError(str(e)) from e
        except Exception as e:
            logging.exception(f"Unexpected error during nas {action}")
            raise ToolError(str(e)) from e

    return mcp
