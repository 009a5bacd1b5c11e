"""Device layout planning core."""
from rtplan.core.classifier import ClassifiedDisks, classify_disks, get_id_dev_link_name
from rtplan.core.directories import get_rtlfs_devices
from rtplan.core.naming import create_qualified_headless_service_name
from rtplan.core.partition import partition_into_balanced_groups
from rtplan.core.planner import LayoutPlanner, LayoutPolicy, get_rt_devices, select_policy

__all__ = [
    'ClassifiedDisks',
    'classify_disks',
    'get_id_dev_link_name',
    'partition_into_balanced_groups',
    'LayoutPlanner',
    'LayoutPolicy',
    'select_policy',
    'get_rt_devices',
    'get_rtlfs_devices',
    'create_qualified_headless_service_name',
]
