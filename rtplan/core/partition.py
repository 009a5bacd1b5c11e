"""Balanced contiguous grouping."""
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def partition_into_balanced_groups(items: Sequence[T], group_count: int) -> List[List[T]]:
    """Split ``items`` into ``group_count`` contiguous groups.

    Group sizes differ by at most one and larger groups come first, e.g.
    5 items into 2 groups gives sizes [3, 2]. Every item lands in exactly
    one group. With more groups than items the trailing groups are empty.

    Raises:
        ValueError: If group_count is less than 1
    """
    if group_count < 1:
        raise ValueError(f"group_count must be at least 1, got {group_count}")

    remaining = list(items)
    groups: List[List[T]] = []

    for groups_left in range(group_count, 0, -1):
        chunk_size = -(-len(remaining) // groups_left)
        groups.append(remaining[:chunk_size])
        remaining = remaining[chunk_size:]

    return groups
