"""GPU cluster operations.

The service client must be bound to the cluster service base, e.g.::

    client = ServiceClient.from_settings(settings, "gpu", "baremetal", project_id, region_id, version="v3")
"""

from gcorecloud.client import ServiceClient
from gcorecloud.clusters.models import Cluster, ClusterPage
from gcorecloud.clusters.options import (
    ClusterActionOpts,
    CreateClusterOpts,
    DeleteClusterOpts,
    RenameClusterOpts,
)
from gcorecloud.extract import extract_one
from gcorecloud.pagination import Pager
from gcorecloud.tasks import Task, TaskResults, extract_created_resource_id

CLUSTERS_PATH = "clusters"
ACTION_PATH = "action"

CLUSTER_TASK_KEY = "ai_clusters"


def clusters_url(client: ServiceClient) -> str:
    return client.service_url(CLUSTERS_PATH)


def cluster_url(client: ServiceClient, cluster_id: str) -> str:
    return client.service_url(CLUSTERS_PATH, cluster_id)


def cluster_action_url(client: ServiceClient, cluster_id: str) -> str:
    return client.service_url(CLUSTERS_PATH, cluster_id, ACTION_PATH)


def list_clusters(client: ServiceClient) -> Pager[ClusterPage]:
    """Return a pager over all GPU clusters."""
    return Pager(client, clusters_url(client), ClusterPage)


def list_all_clusters(client: ServiceClient) -> list[Cluster]:
    """Fetch every GPU cluster."""
    return list_clusters(client).all_pages()


def get_cluster(client: ServiceClient, cluster_id: str) -> Cluster:
    response = client.get(cluster_url(client, cluster_id))
    return extract_one(response.content, Cluster)


def create_cluster(client: ServiceClient, opts: CreateClusterOpts) -> TaskResults:
    """Start creating a cluster; returns the ids of the started tasks."""
    response = client.post(clusters_url(client), opts.to_request_body(), ok_codes=(200, 201))
    return extract_one(response.content, TaskResults)


def delete_cluster(client: ServiceClient, cluster_id: str, opts: DeleteClusterOpts | None = None) -> TaskResults:
    url = cluster_url(client, cluster_id)
    if opts is not None:
        url += opts.to_query()
    response = client.delete(url)
    return extract_one(response.content, TaskResults)


def rename_cluster(client: ServiceClient, cluster_id: str, opts: RenameClusterOpts) -> Cluster:
    response = client.patch(cluster_url(client, cluster_id), opts.to_request_body(), ok_codes=(200,))
    return extract_one(response.content, Cluster)


def cluster_action(client: ServiceClient, cluster_id: str, opts: ClusterActionOpts) -> TaskResults:
    """Run an action (start, stop, reboot, resize...) on a cluster."""
    response = client.post(cluster_action_url(client, cluster_id), opts.to_request_body())
    return extract_one(response.content, TaskResults)


def extract_cluster_id_from_task(task: Task) -> str:
    return extract_created_resource_id(task, CLUSTER_TASK_KEY, "GPU cluster")
