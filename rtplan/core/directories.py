"""Directory-backed (rtlfs) device planning."""
from typing import Any, Iterable, List, Optional

from rtplan.core.logger import get_logger
from rtplan.models.config import ConfigValidationError, StoreConfig
from rtplan.models.device import Directory, RtlfsDevice

logger = get_logger(__name__)


def get_rtlfs_devices(directories: Iterable[Any], store_config: Optional[StoreConfig]) -> List[RtlfsDevice]:
    """Build one emulated device per directory, in the given order.

    Args:
        directories: Directory objects, plain paths or ``{path: ...}`` mappings
        store_config: Store options applied to every device

    Mount point checks are always disabled for directory devices.
    """
    if store_config is None:
        raise ConfigValidationError("no StoreConfig provided")

    devices = []
    for entry in directories:
        directory = Directory.coerce(entry)
        devices.append(RtlfsDevice(
            name=directory.name,
            path=directory.path,
            check_mountpoint=0,
            psize=store_config.lmdb_page_size,
            verify_chid=store_config.rt_verify_chid,
            sync=store_config.sync,
            plevel_override=store_config.rt_plevel_override,
            maxsize=store_config.max_size,
        ))

    logger.debug(f"Planned {len(devices)} directory device(s)")
    return devices
