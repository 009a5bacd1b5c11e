"""Local disk models."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LocalDisk:
    """A block device as reported by host disk discovery."""
    name: str                 # sda, nvme0n1
    dev_links: str = ""       # space separated /dev/disk/by-* aliases
    rotational: bool = False  # True for spinning disks
    empty: bool = True        # No filesystem or partition table
    partition_count: int = 0
    size_bytes: int = 0
    model: str = ""

    @property
    def is_eligible(self) -> bool:
        """True if the disk is unused and can be handed to the storage engine."""
        return self.empty and self.partition_count == 0

    @property
    def device_path(self) -> str:
        return f"/dev/{self.name}"

    @property
    def media(self) -> str:
        return "hdd" if self.rotational else "ssd"

    @property
    def size_human(self) -> str:
        """Human-readable size."""
        size = self.size_bytes
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size < 1024:
                return f"{size:.1f}{unit}"
            size /= 1024
        return f"{size:.1f}PB"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LocalDisk":
        """Build a disk from a discovery record.

        Accepts both snake_case and the camelCase keys used by discovery
        output (``devLinks``, ``partitionCount``). ``partitions`` may be a
        list of partition records or a count.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Disk entry must be a mapping, got {type(data).__name__}")

        name = data.get('name')
        if not name:
            raise ValueError("Disk entry missing 'name' field")

        partition_count = _partition_count(data)

        dev_links = data.get('dev_links', data.get('devLinks', '')) or ''
        if isinstance(dev_links, (list, tuple)):
            dev_links = ' '.join(dev_links)

        return cls(
            name=str(name),
            dev_links=str(dev_links),
            rotational=_as_bool(data.get('rotational', False), 'rotational'),
            empty=_as_bool(data.get('empty', True), 'empty'),
            partition_count=partition_count,
            size_bytes=int(data.get('size_bytes', data.get('size', 0)) or 0),
            model=str(data.get('model', '') or '').strip(),
        )


def _partition_count(data: Dict[str, Any]) -> int:
    value: Optional[Any] = None
    for key in ('partition_count', 'partitionCount', 'partitions'):
        if key in data:
            value = data[key]
            break

    if value is None:
        return 0
    if isinstance(value, (list, tuple)):
        return len(value)
    return int(value)


def _as_bool(value: Any, key: str) -> bool:
    """Read a flag that may arrive as a bool, 0/1 or a string like "false"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ('1', 'true', 'yes', 'on'):
            return True
        if text in ('0', 'false', 'no', 'off', ''):
            return False
    raise ValueError(f"'{key}' must be a boolean, got {value!r}")
