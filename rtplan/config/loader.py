"""YAML inventory loader."""
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from rtplan.core.logger import get_logger
from rtplan.models.config import ConfigValidationError, StoreConfig
from rtplan.models.device import Directory
from rtplan.models.disk import LocalDisk

logger = get_logger(__name__)


class ConfigLoader:
    """Loads a node inventory: store config, discovered disks and directories.

    Expected layout::

        storeConfig:
          useMetadataOffload: true
        disks:
          - name: sda
            devLinks: /dev/disk/by-id/ata-WDC_1 /dev/disk/by-id/wwn-0x5000
            rotational: true
            empty: true
            partitions: 0
        directories:
          - /var/lib/rtlfs/0
    """

    def __init__(self, config_path: str = "rtplan.yml"):
        self.config_path = Path(config_path)
        self.raw_config: Optional[Dict[str, Any]] = None
        self.store_config: Optional[StoreConfig] = None
        self.disks: List[LocalDisk] = []
        self.directories: List[Directory] = []

    def load(self) -> Dict[str, Any]:
        """Load and validate the YAML inventory file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path) as f:
            try:
                self.raw_config = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigValidationError(f"Invalid YAML in {self.config_path}: {exc}") from exc

        if not self.raw_config:
            raise ConfigValidationError("Config file is empty.")

        if not isinstance(self.raw_config, dict):
            raise ConfigValidationError("Config file must contain a mapping at the top level")

        self.store_config = self._parse_store_config(self.raw_config.get('storeConfig'))
        self.disks = self._parse_disks(self.raw_config.get('disks'))
        self.directories = self._parse_directories(self.raw_config.get('directories'))

        logger.debug(
            f"Loaded {self.config_path}: {len(self.disks)} disk(s), "
            f"{len(self.directories)} directory(ies)"
        )
        return self.raw_config

    def get_store_config(self) -> StoreConfig:
        if self.store_config is None:
            raise ConfigValidationError("Configuration not loaded; call load() first.")
        return self.store_config

    def get_disks(self) -> List[LocalDisk]:
        return list(self.disks)

    def get_directories(self) -> List[Directory]:
        return list(self.directories)

    def _parse_store_config(self, section: Any) -> StoreConfig:
        if section is None:
            return StoreConfig()
        return StoreConfig.from_manifest(section)

    def _parse_disks(self, section: Any) -> List[LocalDisk]:
        if section is None:
            return []
        if not isinstance(section, list):
            raise ConfigValidationError("'disks' must be a list of disk definitions")

        disks = []
        for idx, entry in enumerate(section):
            try:
                disks.append(LocalDisk.from_dict(entry))
            except (TypeError, ValueError) as exc:
                raise ConfigValidationError(f"Invalid disk in 'disks'[{idx}]: {exc}") from exc
        return disks

    def _parse_directories(self, section: Any) -> List[Directory]:
        if section is None:
            return []
        if not isinstance(section, list):
            raise ConfigValidationError("'directories' must be a list of paths")

        directories = []
        for idx, entry in enumerate(section):
            try:
                directories.append(Directory.coerce(entry))
            except ValueError as exc:
                raise ConfigValidationError(f"Invalid directory in 'directories'[{idx}]: {exc}") from exc
        return directories
