"""Network interface configurations of cluster servers.

An interface is one of three shapes, selected by its ``type`` field:

- ``external``: attached to the public network.
- ``subnet``: attached to a specific subnet of a network.
- ``any_subnet``: attached to any subnet of a network.

The same shapes are used in create requests and in cluster responses.
"""

from typing import Literal

from pydantic import BaseModel

from gcorecloud.clusters.types import FloatingIPSource, IPFamilyType
from gcorecloud.variant import VariantCodec, VariantEnvelope


class FloatingIP(BaseModel):
    source: FloatingIPSource
    existing_floating_id: str | None = None


class ExternalInterface(BaseModel):
    type: Literal["external"] = "external"
    name: str | None = None
    ip_family: IPFamilyType | None = None


class SubnetInterface(BaseModel):
    type: Literal["subnet"] = "subnet"
    network_id: str
    subnet_id: str
    name: str | None = None
    floating_ip: FloatingIP | None = None


class AnySubnetInterface(BaseModel):
    type: Literal["any_subnet"] = "any_subnet"
    network_id: str
    name: str | None = None
    ip_family: IPFamilyType | None = None
    ip_address: str | None = None
    floating_ip: FloatingIP | None = None


Interface = ExternalInterface | SubnetInterface | AnySubnetInterface


class InterfaceUnion(VariantEnvelope[Interface]):
    """Exactly one interface configuration."""

    @property
    def external_interface(self) -> ExternalInterface | None:
        return self.get("external")

    @property
    def subnet_interface(self) -> SubnetInterface | None:
        return self.get("subnet")

    @property
    def any_subnet_interface(self) -> AnySubnetInterface | None:
        return self.get("any_subnet")

    def interface_type(self) -> str:
        return self.tag


INTERFACE_CODEC: VariantCodec[Interface] = VariantCodec(
    {
        "external": ExternalInterface,
        "subnet": SubnetInterface,
        "any_subnet": AnySubnetInterface,
    },
    discriminator="type",
    envelope=InterfaceUnion,
    name="interface",
)
InterfaceUnion.codec = INTERFACE_CODEC
