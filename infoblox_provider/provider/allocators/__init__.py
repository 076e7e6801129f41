"""Allocation strategies for network containers.

- DirectAllocator: create the container at an explicit CIDR
- ParentAllocator: allocate the next available block from a parent container
"""

from ..objects import AddressFamily, ObjectManager
from .base import ALLOCATE_FROM_PARENT_PREFIX_LEN, MIN_PREFIX_LEN, ContainerAllocator
from .direct import DirectAllocator
from .parent import ParentAllocator

__all__ = [
    "ALLOCATE_FROM_PARENT_PREFIX_LEN",
    "MIN_PREFIX_LEN",
    "ContainerAllocator",
    "DirectAllocator",
    "ParentAllocator",
    "select_allocator",
]


def select_allocator(
    prefix_len: int, object_manager: ObjectManager, family: AddressFamily
) -> ContainerAllocator:
    """Pick the allocation strategy for ``prefix_len``."""
    if prefix_len >= ALLOCATE_FROM_PARENT_PREFIX_LEN:
        return ParentAllocator(object_manager, family)
    return DirectAllocator(object_manager, family)
