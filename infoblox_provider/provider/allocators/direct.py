"""Direct allocator: create a network container at an explicit CIDR."""

from typing import Any, Dict

from oslo_log import log as logging

from ..exceptions import ConnectorError, RemoteError
from ..objects import NetworkContainer
from ..schema import NetworkContainerConfig
from .base import ContainerAllocator

LOG = logging.getLogger(__name__)


class DirectAllocator(ContainerAllocator):
    """Creates the container at ``cidr`` with a single connector call."""

    def allocate(
        self, config: NetworkContainerConfig, ext_attrs: Dict[str, Any]
    ) -> NetworkContainer:
        LOG.debug("Creating %s container %s in network view %s",
                  self.family.value, config.cidr, config.network_view)
        try:
            return self.object_manager.create_network_container(
                config.network_view,
                config.cidr,
                self.family.is_ipv6,
                config.comment,
                ext_attrs,
            )
        except ConnectorError as e:
            LOG.error("Failed to create container %s in network view %s: %s",
                      config.cidr, config.network_view, e)
            raise RemoteError(
                details=(
                    f"creation of {self.family.name} network container block failed "
                    f"in network view '{config.network_view}': {e}"
                )
            )
