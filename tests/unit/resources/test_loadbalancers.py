"""Tests for load balancer operations."""

import pytest

from gcorecloud.errors import TaskResultError
from gcorecloud.loadbalancers import (
    LoadBalancerPage,
    extract_loadbalancer_id_from_task,
    get_loadbalancer,
    list_all_loadbalancers,
    list_loadbalancers,
)
from gcorecloud.tasks import Task
from gcorecloud.testing import linked_pages, mock_service_client, serve_json

BASE = "https://api.example.com/cloud/v1/loadbalancers/1/2"


def loadbalancer_json(lb_id="lb-1", **overrides):
    data = {
        "id": lb_id,
        "name": "web",
        "provisioning_status": "ACTIVE",
        "operating_status": "ONLINE",
        "vip_address": "203.0.113.10",
        "vip_port_id": "port-1",
        "listeners": [{"id": "listener-1"}],
        "created_at": "2024-01-02T03:04:05+00:00",
        "updated_at": None,
        "project_id": 1,
        "region_id": 2,
        "region": "Luxembourg",
        "tags": ["web"],
        "flavor": {"flavor_id": "lb1-1-2", "flavor_name": "lb1-1-2", "vcpus": 1, "ram": 2048},
        "metadata": [{"key": "owner", "value": "ops", "read_only": False}],
        "vrrp_ips": [{"ip_address": "10.0.0.2", "subnet_id": "sub-1"}],
        "logging": {"enabled": True, "topic_name": "lb-logs", "retention_policy": {"period": 7}},
    }
    data.update(overrides)
    return data


@pytest.mark.unit
def test_list_all_loadbalancers():
    pages = [[loadbalancer_json("lb-1"), loadbalancer_json("lb-2")], [loadbalancer_json("lb-3")]]
    client = mock_service_client(serve_json(linked_pages(BASE, pages)), BASE)

    result = list_all_loadbalancers(client)

    assert [lb.id for lb in result] == ["lb-1", "lb-2", "lb-3"]
    assert result[0].listeners[0].id == "listener-1"
    assert result[0].logging.retention_policy.period == 7


@pytest.mark.unit
def test_list_loadbalancers_returns_pager():
    client = mock_service_client(serve_json(linked_pages(BASE, [[loadbalancer_json()]])), BASE)

    pages = list(list_loadbalancers(client))

    assert len(pages) == 1
    assert isinstance(pages[0], LoadBalancerPage)


@pytest.mark.unit
def test_get_loadbalancer():
    client = mock_service_client(serve_json({f"{BASE}/lb-7": loadbalancer_json("lb-7")}), BASE)

    lb = get_loadbalancer(client, "lb-7")

    assert lb.id == "lb-7"
    assert lb.flavor.flavor_name == "lb1-1-2"
    assert not lb.is_deleted()


@pytest.mark.unit
def test_is_deleted():
    client = mock_service_client(
        serve_json({f"{BASE}/lb-8": loadbalancer_json("lb-8", provisioning_status="DELETED")}), BASE
    )

    assert get_loadbalancer(client, "lb-8").is_deleted()


@pytest.mark.unit
def test_extract_loadbalancer_id_from_task():
    task = Task(id="t", created_resources={"loadbalancers": ["lb-1"]})

    assert extract_loadbalancer_id_from_task(task) == "lb-1"


@pytest.mark.unit
def test_extract_loadbalancer_id_missing_key():
    task = Task(id="t", created_resources={"ai_clusters": ["c-1"]})

    with pytest.raises(TaskResultError, match="loadbalancer"):
        extract_loadbalancer_id_from_task(task)


@pytest.mark.unit
@pytest.mark.parametrize("field", ["listeners", "tags", "metadata", "vrrp_ips", "additional_vips", "floating_ips"])
def test_null_list_field_decodes_as_empty(field):
    pages = [[loadbalancer_json("lb-1", **{field: None}), loadbalancer_json("lb-2")]]
    client = mock_service_client(serve_json(linked_pages(BASE, pages)), BASE)

    result = list_all_loadbalancers(client)

    assert [lb.id for lb in result] == ["lb-1", "lb-2"]
    assert getattr(result[0], field) == []
