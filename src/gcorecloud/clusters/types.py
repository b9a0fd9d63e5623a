"""Enumerations used by GPU cluster requests and responses."""

from enum import StrEnum


class IPFamilyType(StrEnum):
    DUAL = "dual"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


class ClusterActionType(StrEnum):
    START = "start"
    STOP = "stop"
    SOFT_REBOOT = "soft_reboot"
    HARD_REBOOT = "hard_reboot"
    RESIZE = "resize"
    UPDATE_TAGS = "update_tags"


class VolumeSource(StrEnum):
    IMAGE = "image"
    SNAPSHOT = "snapshot"
    NEW = "new"


class VolumeType(StrEnum):
    STANDARD = "standard"
    SSD_HIIOPS = "ssd_hiiops"
    SSD_LOWLATENCY = "ssd_lowlatency"
    COLD = "cold"
    ULTRA = "ultra"


class FloatingIPSource(StrEnum):
    NEW = "new"
    EXISTING = "existing"
