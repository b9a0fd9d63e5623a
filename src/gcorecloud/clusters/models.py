"""GPU cluster response models."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from gcorecloud.clusters.interfaces import InterfaceUnion
from gcorecloud.extract import null_as_empty
from gcorecloud.pagination import LinkedPage


class Tag(BaseModel):
    key: str
    value: str
    read_only: bool = False


class Volume(BaseModel):
    size: int
    type: str
    deleted_on_termination: bool = False
    name: str | None = None
    boot_index: int | None = None
    image_id: str | None = None
    snapshot_id: str | None = None
    tags: list[Tag] = Field(default_factory=list)

    _null_tags = field_validator("tags", mode="before")(null_as_empty)


class ClusterServerSettings(BaseModel):
    interfaces: list[InterfaceUnion] = Field(default_factory=list)
    security_groups: list[str] = Field(default_factory=list)
    volumes: list[Volume] = Field(default_factory=list)
    user_data: str | None = None
    keypair_name: str | None = None

    _null_lists = field_validator("interfaces", "security_groups", "volumes", mode="before")(null_as_empty)


class Cluster(BaseModel):
    """A bare-metal GPU cluster."""

    id: str
    name: str
    status: str
    flavor_id: str
    servers_count: int
    created_at: datetime
    updated_at: datetime | None = None
    servers_ids: list[str] | None = None
    servers_settings: ClusterServerSettings = Field(default_factory=ClusterServerSettings)
    tags: list[Tag] = Field(default_factory=list)

    @field_validator("servers_settings", mode="before")
    @classmethod
    def _null_servers_settings(cls, value):
        return {} if value is None else value

    _null_tags = field_validator("tags", mode="before")(null_as_empty)


class ClusterPage(LinkedPage[Cluster]):
    """Page of a GPU cluster listing."""

    resource_model = Cluster
