"""Device assignment models handed to the target configuration renderer."""
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Directory:
    """A filesystem directory backing an emulated device."""
    path: str

    @property
    def name(self) -> str:
        """Final path component, ignoring trailing slashes ("/" stays "/")."""
        stripped = self.path.rstrip(os.sep)
        if not stripped:
            return os.sep
        return os.path.basename(stripped)

    @classmethod
    def coerce(cls, value: Union["Directory", str, Dict[str, Any]]) -> "Directory":
        """Accept a Directory, a plain path or a ``{path: ...}`` mapping."""
        if isinstance(value, Directory):
            return value
        if isinstance(value, dict):
            path = value.get('path')
            if not path:
                raise ValueError("Directory entry missing 'path' field")
            return cls(path=str(path))
        if value is None or not str(value).strip():
            raise ValueError("Directory path cannot be empty")
        return cls(path=str(value))


@dataclass(frozen=True)
class RTDevice:
    """A physical disk assigned to the storage engine.

    ``journal``, ``metadata``, ``bcache`` and ``bcache_writearound`` are only
    set when the device offloads journal and metadata to an SSD.
    """
    name: str
    device: str                 # /dev/<kernel name>
    psize: int
    verify_chid: int
    sync: int
    plevel_override: int = 0    # 0 means engine default
    journal: Optional[str] = None
    metadata: Optional[str] = None
    bcache: Optional[int] = None
    bcache_writearound: Optional[int] = None

    @property
    def is_offloaded(self) -> bool:
        return self.journal is not None

    def to_dict(self) -> Dict[str, Any]:
        """Render with the field names the target's config parser expects."""
        data: Dict[str, Any] = {
            'name': self.name,
            'device': self.device,
            'psize': self.psize,
            'verify_chid': self.verify_chid,
            'sync': self.sync,
        }
        if self.is_offloaded:
            data['journal'] = self.journal
            data['metadata'] = self.metadata
            data['bcache'] = self.bcache
            data['bcache_writearound'] = self.bcache_writearound
        if self.plevel_override:
            data['plevel_override'] = self.plevel_override
        return data


@dataclass(frozen=True)
class RtlfsDevice:
    """A directory assigned to the storage engine as an emulated device."""
    name: str
    path: str
    psize: int
    verify_chid: int
    sync: int
    check_mountpoint: int = 0
    plevel_override: int = 0
    maxsize: int = 0            # bytes, 0 means unlimited

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'name': self.name,
            'path': self.path,
            'checkMountpoint': self.check_mountpoint,
            'psize': self.psize,
            'verify_chid': self.verify_chid,
            'sync': self.sync,
        }
        if self.maxsize:
            data['maxsize'] = self.maxsize
        if self.plevel_override:
            data['plevel_override'] = self.plevel_override
        return data
