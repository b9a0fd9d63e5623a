"""Request options for GPU cluster operations."""

from pydantic import UUID4, Field, PositiveInt, model_validator

from gcorecloud.clusters.interfaces import InterfaceUnion
from gcorecloud.clusters.types import ClusterActionType, VolumeSource, VolumeType
from gcorecloud.options import RequestOptions


class ClusterActionOpts(RequestOptions):
    action: ClusterActionType
    servers_count: int | None = None
    tags: dict[str, str] | None = None


class DeleteClusterOpts(RequestOptions):
    """Which attached resources to delete together with the cluster."""

    all_floating_ips: bool = False
    all_reserved_fixed_ips: bool = False
    all_volumes: bool = False
    floating_ip_ids: list[UUID4] | None = None
    reserved_fixed_ip_ids: list[UUID4] | None = None
    volume_ids: list[UUID4] | None = None

    @model_validator(mode="after")
    def _check_exclusive(self):
        pairs = (
            ("all_floating_ips", "floating_ip_ids"),
            ("all_reserved_fixed_ips", "reserved_fixed_ip_ids"),
            ("all_volumes", "volume_ids"),
        )
        for flag, ids in pairs:
            if getattr(self, flag) and getattr(self, ids):
                msg = f"{flag} and {ids} cannot be used together"
                raise ValueError(msg)
        return self


class RenameClusterOpts(RequestOptions):
    name: str = Field(min_length=1)


class ServerCredentialsOpts(RequestOptions):
    username: str | None = None
    password: str | None = None
    keypair_name: str | None = None


class VolumeOpts(RequestOptions):
    source: VolumeSource
    boot_index: int
    name: str = Field(min_length=1)
    size: PositiveInt
    type: VolumeType
    delete_on_termination: bool | None = None
    image_id: UUID4 | None = None
    snapshot_id: UUID4 | None = None
    tags: dict[str, str] | None = None

    @model_validator(mode="after")
    def _check_source(self):
        if self.image_id and self.snapshot_id:
            msg = "image_id and snapshot_id cannot be used together"
            raise ValueError(msg)
        if self.source == VolumeSource.IMAGE and not self.image_id:
            msg = "image_id is required when source is 'image'"
            raise ValueError(msg)
        if self.source == VolumeSource.SNAPSHOT and not self.snapshot_id:
            msg = "snapshot_id is required when source is 'snapshot'"
            raise ValueError(msg)
        return self


class ServerSettingsOpts(RequestOptions):
    interfaces: list[InterfaceUnion] = Field(min_length=1)
    volumes: list[VolumeOpts] = Field(min_length=1)
    security_groups: list[str] | None = None
    user_data: str | None = None
    credentials: ServerCredentialsOpts | None = None


class CreateClusterOpts(RequestOptions):
    name: str = Field(min_length=1)
    flavor: str = Field(min_length=1)
    servers_settings: ServerSettingsOpts
    servers_count: PositiveInt | None = None
    tags: dict[str, str] | None = None
