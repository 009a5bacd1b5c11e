"""Physical device layout planning for a storage target node.

Three mutually exclusive policies decide which eligible disks become data
devices:

- ALL_SSD: every SSD/NVMe disk is a data device (high performance).
- ALL_HDD: every rotational disk is a data device (capacity, cold archive).
- HYBRID: rotational disks are data devices, each paired with an SSD that
  carries its journal and metadata. HDDs are spread over the SSDs in
  balanced contiguous groups.
"""
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from rtplan.core.classifier import ClassifiedDisks, classify_disks, get_id_dev_link_name
from rtplan.core.logger import get_logger
from rtplan.core.partition import partition_into_balanced_groups
from rtplan.models.config import (
    ConfigValidationError,
    MediaMismatchError,
    NoMediaError,
    StoreConfig,
)
from rtplan.models.device import RTDevice
from rtplan.models.disk import LocalDisk

logger = get_logger(__name__)

OFFLOAD_IGNORED_ADVISORY = "useMetadataOffload parameter is ignored due to use useAllSSD=true"


class LayoutPolicy(Enum):
    """Device allocation policy."""
    ALL_SSD = "all-ssd"
    ALL_HDD = "all-hdd"
    HYBRID = "hybrid"


def select_policy(store_config: StoreConfig) -> LayoutPolicy:
    """Pick the allocation policy a store configuration asks for."""
    if store_config.use_all_ssd:
        return LayoutPolicy.ALL_SSD
    if store_config.use_metadata_offload:
        return LayoutPolicy.HYBRID
    return LayoutPolicy.ALL_HDD


def bcache_flags(store_config: StoreConfig) -> Tuple[int, int]:
    """Return (bcache, bcache_writearound) for an offloaded HDD.

    Write-around stays on unless the cache is enabled in write-back mode.
    """
    if not store_config.use_bcache:
        return 0, 1
    return 1, 0 if store_config.use_bcache_wb else 1


class LayoutPlanner:
    """Turn discovered disks into an ordered list of RT devices."""

    def __init__(self, store_config: Optional[StoreConfig]):
        if store_config is None:
            raise ConfigValidationError("no StoreConfig provided")
        self.store_config = store_config
        self.policy = select_policy(store_config)
        self.advisories: List[str] = []

    def plan(self, disks: Iterable[LocalDisk]) -> List[RTDevice]:
        """Build the device list for this node.

        Raises:
            NoMediaError: No eligible disks of the kind the policy needs
            MediaMismatchError: HYBRID policy with fewer HDDs than SSDs
        """
        self.advisories = []
        disks = list(disks)
        if not disks:
            logger.debug("No disks discovered, nothing to plan")
            return []

        classified = classify_disks(disks)
        logger.debug(
            f"Planning {self.policy.value}: {len(classified.ssds)} SSD, "
            f"{len(classified.hdds)} HDD eligible, {len(classified.excluded)} excluded"
        )

        builder = self._builders[self.policy]
        devices = builder(self, classified)

        logger.debug(f"Planned {len(devices)} device(s) with {self.policy.value} policy")
        return devices

    def _plan_all_ssd(self, classified: ClassifiedDisks) -> List[RTDevice]:
        if not classified.ssds:
            raise NoMediaError("No SSD/NVMe media found")

        if self.store_config.use_metadata_offload:
            self.advisories.append(OFFLOAD_IGNORED_ADVISORY)
            logger.warning(OFFLOAD_IGNORED_ADVISORY)

        return [self._data_device(disk) for disk in classified.ssds]

    def _plan_all_hdd(self, classified: ClassifiedDisks) -> List[RTDevice]:
        if not classified.hdds:
            raise NoMediaError("No HDD media found")

        return [self._data_device(disk) for disk in classified.hdds]

    def _plan_hybrid(self, classified: ClassifiedDisks) -> List[RTDevice]:
        hdds, ssds = classified.hdds, classified.ssds
        if not hdds:
            raise NoMediaError("No HDD media found")
        if len(hdds) < len(ssds) or not ssds:
            raise MediaMismatchError(hdds=len(hdds), ssds=len(ssds))

        bcache, writearound = bcache_flags(self.store_config)
        groups = partition_into_balanced_groups(hdds, len(ssds))

        devices = []
        for ssd, group in zip(ssds, groups):
            journal = get_id_dev_link_name(ssd.dev_links)
            metadata = f"{journal},{self.store_config.use_metadata_mask}"
            logger.debug(f"{ssd.name} ({journal}) serves {len(group)} HDD(s)")

            for disk in group:
                devices.append(self._data_device(
                    disk,
                    journal=journal,
                    metadata=metadata,
                    bcache=bcache,
                    bcache_writearound=writearound,
                ))
        return devices

    def _data_device(self, disk: LocalDisk, **offload) -> RTDevice:
        cfg = self.store_config
        return RTDevice(
            name=get_id_dev_link_name(disk.dev_links),
            device=disk.device_path,
            psize=cfg.lmdb_page_size,
            verify_chid=cfg.rt_verify_chid,
            sync=cfg.sync,
            plevel_override=cfg.rt_plevel_override,
            **offload,
        )

    _builders = {
        LayoutPolicy.ALL_SSD: _plan_all_ssd,
        LayoutPolicy.ALL_HDD: _plan_all_hdd,
        LayoutPolicy.HYBRID: _plan_hybrid,
    }


def get_rt_devices(disks: Iterable[LocalDisk], store_config: Optional[StoreConfig]) -> List[RTDevice]:
    """Plan RT devices for ``disks`` under ``store_config``."""
    return LayoutPlanner(store_config).plan(disks)
