# pgedge_router/models/database.py
"""Database node data models."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from pgedge_router.models.geo import Coordinate


class Region(BaseModel):
    """Cloud region a node is deployed in."""

    name: str = ""
    code: str = ""
    cloud: str = ""
    availability_zones: list[str] = Field(default_factory=list)


class Connection(BaseModel):
    """Credentials and address of one database endpoint."""

    host: str
    port: int = 5432
    username: str
    password: str = ""
    database: str
    external_ip_address: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class DatabaseNode(BaseModel):
    """One registered database node.

    Only ``id``, ``connection`` and ``location`` drive routing; the remaining
    fields are carried through untouched.
    """

    id: str = ""
    name: str = ""
    pg_version: str = ""
    is_active: bool = True
    availability_zone: str = ""
    region: str = ""
    region_detail: Optional[Region] = None
    public_ip_address: str = ""
    connection: Connection
    location: Coordinate

    model_config = ConfigDict(frozen=True, extra="ignore")
