"""Base class for network container allocators."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..objects import AddressFamily, NetworkContainer, ObjectManager
from ..schema import NetworkContainerConfig

# Smallest accepted non-zero allocate_prefix_len
MIN_PREFIX_LEN = 2

# allocate_prefix_len from which containers are allocated from parent_cidr
ALLOCATE_FROM_PARENT_PREFIX_LEN = 7


class ContainerAllocator(ABC):
    """Abstract base class for network container allocators.

    An allocator turns a validated configuration into exactly one network
    container on the grid.
    """

    def __init__(self, object_manager: ObjectManager, family: AddressFamily):
        """Initialize allocator.

        Args:
            object_manager: Tenant-scoped object manager
            family: Address family of the container
        """
        self.object_manager = object_manager
        self.family = family

    @abstractmethod
    def allocate(
        self, config: NetworkContainerConfig, ext_attrs: Dict[str, Any]
    ) -> NetworkContainer:
        """Create the network container.

        Args:
            config: Resource configuration (already validated)
            ext_attrs: Decoded extensible attributes

        Returns:
            The created NetworkContainer

        Raises:
            RemoteError: Connector call failed
        """
        pass

