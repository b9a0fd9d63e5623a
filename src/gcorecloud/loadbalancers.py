"""Load balancers (API v1).

The service client must be bound to ``loadbalancers/{project_id}/{region_id}``.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from gcorecloud.client import ServiceClient
from gcorecloud.extract import extract_one, null_as_empty
from gcorecloud.pagination import LinkedPage, Pager
from gcorecloud.tasks import Task, extract_created_resource_id

LOADBALANCER_TASK_KEY = "loadbalancers"

PROVISIONING_STATUS_DELETED = "DELETED"


class ItemID(BaseModel):
    id: str


class NetworkPortFixedIP(BaseModel):
    ip_address: str
    subnet_id: str


class Flavor(BaseModel):
    flavor_id: str
    flavor_name: str
    vcpus: int | None = None
    ram: int | None = None


class Metadata(BaseModel):
    key: str
    value: str
    read_only: bool = False


class RetentionPolicy(BaseModel):
    period: int


class Logging(BaseModel):
    enabled: bool
    topic_name: str | None = None
    destination_region_id: int | None = None
    retention_policy: RetentionPolicy | None = None


class FloatingIP(BaseModel):
    id: str
    floating_ip_address: str | None = None
    status: str | None = None


class LoadBalancer(BaseModel):
    id: str
    name: str
    provisioning_status: str
    operating_status: str
    vip_address: str | None = None
    vip_port_id: str | None = None
    listeners: list[ItemID] = Field(default_factory=list)
    creator_task_id: str | None = None
    task_id: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    project_id: int
    region_id: int
    region: str
    tags: list[str] = Field(default_factory=list)
    flavor: Flavor | None = None
    metadata: list[Metadata] = Field(default_factory=list)
    vrrp_ips: list[NetworkPortFixedIP] = Field(default_factory=list)
    vip_ip_family: str | None = None
    additional_vips: list[NetworkPortFixedIP] = Field(default_factory=list)
    floating_ips: list[FloatingIP] = Field(default_factory=list)
    logging: Logging | None = None
    preferred_connectivity: str | None = None

    _null_lists = field_validator(
        "listeners", "tags", "metadata", "vrrp_ips", "additional_vips", "floating_ips", mode="before"
    )(null_as_empty)

    def is_deleted(self) -> bool:
        return self.provisioning_status == PROVISIONING_STATUS_DELETED


class LoadBalancerPage(LinkedPage[LoadBalancer]):
    """Page of a load balancer listing."""

    resource_model = LoadBalancer


def list_loadbalancers(client: ServiceClient) -> Pager[LoadBalancerPage]:
    return Pager(client, client.service_url(), LoadBalancerPage)


def list_all_loadbalancers(client: ServiceClient) -> list[LoadBalancer]:
    return list_loadbalancers(client).all_pages()


def get_loadbalancer(client: ServiceClient, loadbalancer_id: str) -> LoadBalancer:
    response = client.get(client.service_url(loadbalancer_id))
    return extract_one(response.content, LoadBalancer)


def extract_loadbalancer_id_from_task(task: Task) -> str:
    return extract_created_resource_id(task, LOADBALANCER_TASK_KEY, "loadbalancer")
