"""Tests for region operations."""

import pytest

from gcorecloud.errors import DecodeError, NotFoundError
from gcorecloud.regions import get_region, list_all_regions, list_regions
from gcorecloud.testing import collection_body, linked_pages, mock_service_client, serve_json

BASE = "https://api.example.com/cloud/v1/regions"


def region_json(region_id=1, **overrides):
    data = {
        "id": region_id,
        "display_name": f"Region {region_id}",
        "keystone_name": f"region-{region_id}",
        "state": "ACTIVE",
        "endpoint_type": "public",
        "external_network_id": "ext-net",
        "spice_proxy_url": "https://spice.example.com",
        "created_on": "2020-03-04T05:06:07",
        "keystone_id": 3,
        "keystone": {
            "id": 3,
            "url": "https://keystone.example.com",
            "state": "NEW",
            "keystone_federated_domain_id": "domain",
            "created_on": "2020-01-01T00:00:00",
        },
    }
    data.update(overrides)
    return data


@pytest.mark.unit
def test_list_all_regions_across_pages():
    pages = [[region_json(1)], [region_json(2)], [region_json(3)]]
    client = mock_service_client(serve_json(linked_pages(BASE, pages)), BASE)

    regions = list_all_regions(client)

    assert [r.id for r in regions] == [1, 2, 3]
    assert regions[0].keystone.url == "https://keystone.example.com"


@pytest.mark.unit
def test_list_regions_empty():
    client = mock_service_client(serve_json({BASE: collection_body([])}), BASE)

    pager = list_regions(client)
    page = pager.next_page()

    assert page.is_empty()
    assert pager.next_page() is None


@pytest.mark.unit
def test_region_missing_required_field():
    broken = region_json()
    del broken["display_name"]
    client = mock_service_client(serve_json({BASE: collection_body([broken])}), BASE)

    with pytest.raises(DecodeError) as exc_info:
        list_all_regions(client)

    assert exc_info.value.field_path == "results.0.display_name"
    assert exc_info.value.target == "Region"


@pytest.mark.unit
def test_get_region():
    client = mock_service_client(serve_json({f"{BASE}/7": region_json(7)}), BASE)

    assert get_region(client, 7).display_name == "Region 7"


@pytest.mark.unit
def test_get_missing_region():
    client = mock_service_client(serve_json({}), BASE)

    with pytest.raises(NotFoundError):
        get_region(client, 404)
