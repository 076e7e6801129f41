"""Parent allocator: allocate the next available block from a parent container.

The parent is looked up first so that a missing parent is reported as such
instead of as a generic allocation failure. The lookup is read-only, so a
failed allocation leaves nothing behind on the grid.
"""

from typing import Any, Dict

from oslo_log import log as logging

from ..exceptions import ConnectorError, RemoteError
from ..objects import NetworkContainer
from ..schema import NetworkContainerConfig
from .base import ContainerAllocator

LOG = logging.getLogger(__name__)


class ParentAllocator(ContainerAllocator):
    """Looks up ``parent_cidr`` then allocates a block of ``allocate_prefix_len``."""

    def allocate(
        self, config: NetworkContainerConfig, ext_attrs: Dict[str, Any]
    ) -> NetworkContainer:
        network_view = config.network_view
        parent_cidr = config.parent_cidr

        try:
            parent = self.object_manager.get_network_container(
                network_view, parent_cidr, self.family.is_ipv6, None
            )
        except ConnectorError as e:
            LOG.error("Parent container %s not usable in network view %s: %s",
                      parent_cidr, network_view, e)
            raise RemoteError(
                details=(
                    f"allocation of network block within network container '{parent_cidr}' "
                    f"under network view '{network_view}' failed: {e}"
                )
            )

        LOG.debug("Allocating /%d from parent %s (%s)",
                  config.allocate_prefix_len, parent_cidr, parent.ref)

        try:
            return self.object_manager.allocate_network_container(
                network_view,
                parent_cidr,
                self.family.is_ipv6,
                config.allocate_prefix_len,
                config.comment,
                ext_attrs,
            )
        except ConnectorError as e:
            LOG.error("Allocation from %s failed in network view %s: %s",
                      parent_cidr, network_view, e)
            raise RemoteError(
                details=f"allocation of network block failed in network view '{network_view}': {e}"
            )
