"""Split discovered disks into eligible SSD and HDD buckets."""
from dataclasses import dataclass, field
from typing import Iterable, List

from rtplan.models.disk import LocalDisk

BY_ID_PREFIX = "/dev/disk/by-id/"


@dataclass(frozen=True)
class ClassifiedDisks:
    """Eligible disks grouped by media, each list in discovery order."""
    ssds: List[LocalDisk] = field(default_factory=list)
    hdds: List[LocalDisk] = field(default_factory=list)
    devices: List[LocalDisk] = field(default_factory=list)
    excluded: List[LocalDisk] = field(default_factory=list)


def classify_disks(disks: Iterable[LocalDisk]) -> ClassifiedDisks:
    """Bucket eligible disks by media type.

    Disks that already hold a filesystem or partitions are left alone and
    reported in ``excluded``.
    """
    ssds: List[LocalDisk] = []
    hdds: List[LocalDisk] = []
    devices: List[LocalDisk] = []
    excluded: List[LocalDisk] = []

    for disk in disks:
        if not disk.is_eligible:
            excluded.append(disk)
            continue

        if disk.rotational:
            hdds.append(disk)
        else:
            ssds.append(disk)
        devices.append(disk)

    return ClassifiedDisks(ssds=ssds, hdds=hdds, devices=devices, excluded=excluded)


def get_id_dev_link_name(dev_links: str) -> str:
    """Pick the short by-id alias from a disk's link list.

    WWN aliases and anything still containing a path separator after the
    by-id prefix is stripped are skipped. Returns "" when nothing qualifies.
    """
    for link in (dev_links or "").split():
        candidate = link.replace(BY_ID_PREFIX, "", 1)
        if "/" in candidate or "wwn-" in candidate:
            continue
        return candidate
    return ""
