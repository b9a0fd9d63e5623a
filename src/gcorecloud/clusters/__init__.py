"""Bare-metal GPU clusters (API v3)."""

from gcorecloud.clusters.api import (
    cluster_action,
    create_cluster,
    delete_cluster,
    extract_cluster_id_from_task,
    get_cluster,
    list_all_clusters,
    list_clusters,
    rename_cluster,
)
from gcorecloud.clusters.interfaces import (
    INTERFACE_CODEC,
    AnySubnetInterface,
    ExternalInterface,
    FloatingIP,
    InterfaceUnion,
    SubnetInterface,
)
from gcorecloud.clusters.models import Cluster, ClusterPage, ClusterServerSettings, Tag, Volume
from gcorecloud.clusters.options import (
    ClusterActionOpts,
    CreateClusterOpts,
    DeleteClusterOpts,
    RenameClusterOpts,
    ServerCredentialsOpts,
    ServerSettingsOpts,
    VolumeOpts,
)
from gcorecloud.clusters.types import (
    ClusterActionType,
    FloatingIPSource,
    IPFamilyType,
    VolumeSource,
    VolumeType,
)

__all__ = [
    "INTERFACE_CODEC",
    "AnySubnetInterface",
    "Cluster",
    "ClusterActionOpts",
    "ClusterActionType",
    "ClusterPage",
    "ClusterServerSettings",
    "CreateClusterOpts",
    "DeleteClusterOpts",
    "ExternalInterface",
    "FloatingIP",
    "FloatingIPSource",
    "IPFamilyType",
    "InterfaceUnion",
    "RenameClusterOpts",
    "ServerCredentialsOpts",
    "ServerSettingsOpts",
    "SubnetInterface",
    "Tag",
    "Volume",
    "VolumeOpts",
    "VolumeSource",
    "VolumeType",
    "cluster_action",
    "create_cluster",
    "delete_cluster",
    "extract_cluster_id_from_task",
    "get_cluster",
    "list_all_clusters",
    "list_clusters",
    "rename_cluster",
]
