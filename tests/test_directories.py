"""Tests for directory-backed device planning."""
import pytest

from rtplan.core.directories import get_rtlfs_devices
from rtplan.models.config import ConfigValidationError, StoreConfig
from rtplan.models.device import Directory


def test_no_directories():
    assert get_rtlfs_devices([], StoreConfig()) == []


def test_one_device_per_directory_in_order():
    dirs = [Directory("/var/lib/rtlfs/disk1"), Directory("/mnt/data/disk0")]
    devices = get_rtlfs_devices(dirs, StoreConfig())

    assert [d.name for d in devices] == ["disk1", "disk0"]
    assert [d.path for d in devices] == ["/var/lib/rtlfs/disk1", "/mnt/data/disk0"]


def test_mountpoint_check_disabled():
    device = get_rtlfs_devices(["/data/rt0"], StoreConfig())[0]

    assert device.check_mountpoint == 0
    assert device.to_dict()["checkMountpoint"] == 0


def test_pass_through_fields():
    config = StoreConfig(lmdb_page_size=8192, rt_verify_chid=0, sync=2)
    device = get_rtlfs_devices(["/data/rt0"], config)[0]

    assert device.psize == 8192
    assert device.verify_chid == 0
    assert device.sync == 2


def test_optional_fields_omitted_when_unset():
    data = get_rtlfs_devices(["/data/rt0"], StoreConfig())[0].to_dict()

    assert "maxsize" not in data
    assert "plevel_override" not in data


def test_max_size_and_plevel_override():
    config = StoreConfig(max_size=10 * 1024 ** 3, rt_plevel_override=8)
    data = get_rtlfs_devices(["/data/rt0"], config)[0].to_dict()

    assert data["maxsize"] == 10 * 1024 ** 3
    assert data["plevel_override"] == 8


def test_accepts_path_mappings():
    devices = get_rtlfs_devices([{"path": "/data/rt1"}], StoreConfig())
    assert devices[0].name == "rt1"


def test_missing_config():
    with pytest.raises(ConfigValidationError):
        get_rtlfs_devices(["/data/rt0"], None)


@pytest.mark.parametrize(
    "path,name",
    [
        ("/data/rt0", "rt0"),
        ("/data/rt0/", "rt0"),
        ("/data/rt0//", "rt0"),
        ("rt0", "rt0"),
        ("/", "/"),
        ("//", "/"),
    ],
)
def test_device_name_is_last_path_component(path, name):
    device = get_rtlfs_devices([path], StoreConfig())[0]

    assert device.name == name
    assert device.path == path


@pytest.mark.parametrize("entry", [None, "", "   ", {"path": ""}])
def test_blank_directory_rejected(entry):
    with pytest.raises(ValueError):
        get_rtlfs_devices([entry], StoreConfig())
