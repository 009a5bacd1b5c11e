"""Shared test fixtures for rtplan tests."""
import pytest
import yaml

from rtplan.models.config import StoreConfig
from rtplan.models.disk import LocalDisk


def _make_disk(name, rotational, link=None, empty=True, partitions=0, model=""):
    """Build a disk with a by-id link list like udev reports it."""
    link = link or f"{'ata-HDD' if rotational else 'nvme-SSD'}_{name}"
    return LocalDisk(
        name=name,
        dev_links=f"/dev/disk/by-id/wwn-0x5000{name} /dev/disk/by-id/{link} /dev/disk/by-path/pci-{name}",
        rotational=rotational,
        empty=empty,
        partition_count=partitions,
        model=model,
    )


@pytest.fixture
def hdd():
    """Factory for rotational disks."""
    def _hdd(name, **kwargs):
        return _make_disk(name, True, **kwargs)

    return _hdd


@pytest.fixture
def ssd():
    """Factory for solid-state disks."""
    def _ssd(name, **kwargs):
        return _make_disk(name, False, **kwargs)

    return _ssd


@pytest.fixture
def store_config():
    """Default store configuration."""
    return StoreConfig()


@pytest.fixture
def mixed_disks(hdd, ssd):
    """Four HDDs, two SSDs and two disks already in use."""
    return [
        ssd("nvme0n1"),
        hdd("sda"),
        hdd("sdb"),
        hdd("sdc", empty=False),
        ssd("nvme1n1"),
        hdd("sdd"),
        hdd("sde"),
        ssd("nvme2n1", partitions=2),
    ]


@pytest.fixture
def inventory_file(tmp_path):
    """Write an inventory YAML file and return its path."""
    def _write(data, name="rtplan.yml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path

    return _write
