from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class ExportRecord:
    """An export offered by the NAS, as reported by showmount."""

    export_path: str
    share_name: str
    local_name: str


@dataclass(frozen=True)
class MountRecord:
    """Snapshot of a NAS export currently attached to the local mount table."""

    export_path: str
    local_path: str
    share_name: str


class ShareStatus(BaseModel):
    """En share i list-resultatet, annotated with its local mount state."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    export_path: str = Field(..., alias="exportPath")
    mounted: bool = False
    local_path: Optional[str] = Field(default=None, alias="localPath")


class ShareListResult(BaseModel):
    nas_ip: str
    total_shares: int
    mounted_shares: int
    shares: List[ShareStatus] = Field(default_factory=list)


class SaveResult(BaseModel):
    success: bool = True
    message: str = "Successfully saved to NAS"
    source: str
    destination: str
    share: str
    nas_ip: str
