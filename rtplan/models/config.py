"""Store configuration model and configuration errors."""
import re
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

VALID_PAGE_SIZES = (4096, 8192, 16384, 32768)


class ConfigValidationError(Exception):
    """Raised when configuration is missing or malformed."""


class LayoutError(ConfigValidationError):
    """Raised when a store configuration cannot be satisfied by the discovered disks."""


class NoMediaError(LayoutError):
    """No eligible media of the kind the selected policy needs."""


class MediaMismatchError(LayoutError):
    """HDD/SSD counts cannot be paired for metadata offload."""

    def __init__(self, hdds: int, ssds: int):
        self.hdds = hdds
        self.ssds = ssds
        super().__init__(
            f"Confusing use of useMetadataOffload parameter HDDs({hdds}) < SSDs({ssds})"
        )


class StoreConfig(BaseModel):
    """Declarative storage options for a target node.

    Field aliases are the camelCase keys used in cluster manifests; either
    spelling is accepted on input.
    """

    model_config = ConfigDict(extra='forbid', frozen=True, populate_by_name=True)

    use_all_ssd: bool = Field(False, alias='useAllSSD')
    use_metadata_offload: bool = Field(False, alias='useMetadataOffload')
    use_bcache: bool = Field(False, alias='useBCache')
    use_bcache_wb: bool = Field(False, alias='useBCacheWB')
    use_metadata_mask: str = Field("0xff", alias='useMetadataMask')
    lmdb_page_size: int = Field(16384, alias='lmdbPageSize')
    rt_verify_chid: int = Field(1, alias='rtVerifyChid', ge=0, le=2)
    sync: int = Field(1, ge=0, le=3)
    rt_plevel_override: int = Field(0, alias='rtPLevelOverride', ge=0)
    max_size: int = Field(0, alias='maxSize', ge=0)

    @field_validator('lmdb_page_size')
    @classmethod
    def validate_page_size(cls, v):
        """LMDB page size must be one the engine supports."""
        if v not in VALID_PAGE_SIZES:
            raise ValueError(
                f"lmdbPageSize {v} is not supported. "
                f"Valid sizes: {', '.join(str(s) for s in VALID_PAGE_SIZES)}"
            )
        return v

    @field_validator('use_metadata_mask')
    @classmethod
    def validate_metadata_mask(cls, v):
        if not re.match(r'^0x[0-9a-fA-F]+$', v):
            raise ValueError(f"useMetadataMask must be a hex string like 0xff. Got: {v}")
        return v

    @classmethod
    def from_manifest(cls, data: Dict[str, Any]) -> "StoreConfig":
        """Validate a manifest mapping.

        Raises:
            ConfigValidationError: If any option is unknown or out of range
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("'storeConfig' must be a mapping")
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigValidationError(f"Invalid storeConfig: {exc}") from exc

    def to_dict(self):
        """Return the config with manifest (camelCase) keys."""
        return self.model_dump(by_alias=True)
