"""Regions (API v1). The service client must be bound to ``regions``."""

from datetime import datetime

from pydantic import BaseModel

from gcorecloud.client import ServiceClient
from gcorecloud.extract import extract_one
from gcorecloud.pagination import LinkedPage, Pager


class Keystone(BaseModel):
    id: int
    url: str
    state: str
    keystone_federated_domain_id: str | None = None
    created_on: datetime | None = None


class Region(BaseModel):
    id: int
    display_name: str
    keystone_name: str
    state: str
    endpoint_type: str
    external_network_id: str | None = None
    spice_proxy_url: str | None = None
    creator_task_id: str | None = None
    created_on: datetime | None = None
    keystone_id: int | None = None
    keystone: Keystone | None = None


class RegionPage(LinkedPage[Region]):
    """Page of a region listing."""

    resource_model = Region


def list_regions(client: ServiceClient) -> Pager[RegionPage]:
    return Pager(client, client.service_url(), RegionPage)


def list_all_regions(client: ServiceClient) -> list[Region]:
    return list_regions(client).all_pages()


def get_region(client: ServiceClient, region_id: int) -> Region:
    response = client.get(client.service_url(region_id))
    return extract_one(response.content, Region)
