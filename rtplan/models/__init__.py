"""Data models for rtplan."""
from rtplan.models.config import (
    ConfigValidationError,
    LayoutError,
    MediaMismatchError,
    NoMediaError,
    StoreConfig,
)
from rtplan.models.device import Directory, RTDevice, RtlfsDevice
from rtplan.models.disk import LocalDisk

__all__ = [
    'LocalDisk',
    'Directory',
    'RTDevice',
    'RtlfsDevice',
    'StoreConfig',
    'ConfigValidationError',
    'LayoutError',
    'MediaMismatchError',
    'NoMediaError',
]
