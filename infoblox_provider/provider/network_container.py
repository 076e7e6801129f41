"""Network container resource.

Lifecycle callbacks invoked by the plugin host for the
``infoblox_ipv4_network_container`` and ``infoblox_ipv6_network_container``
resource types. Both types share this implementation; the address family
only selects the WAPI object type.

Architecture:
    - Configuration is read fresh from ResourceData on every call
    - The WAPI object reference is the only persisted state
    - Each call builds an ObjectManager scoped to the tenant found in
      the reserved "Tenant ID" extensible attribute
    - All validation happens before the first connector call
"""

from typing import Callable, Optional

from oslo_log import log as logging

from . import allocators
from . import objects
from .exceptions import ConnectorError, RemoteError, ValidationError
from .resource_data import ResourceData
from .schema import NetworkContainerConfig, parse_ext_attrs, tenant_id_from

LOG = logging.getLogger(__name__)


class NetworkContainerResource:
    """Create, read, update and delete network containers.

    Args:
        family: Address family of the containers managed by this resource
        connector: WapiClient shared by all invocations
        object_manager_factory: Builds the tenant-scoped connector capability
            from (connector, caller identity, tenant id)
    """

    def __init__(
        self,
        family: objects.AddressFamily,
        connector,
        object_manager_factory: Optional[Callable[..., objects.ObjectManager]] = None,
    ):
        self.family = family
        self.connector = connector
        self.object_manager_factory = object_manager_factory or objects.ObjectManager

    def _object_manager(self, tenant_id: str) -> objects.ObjectManager:
        return self.object_manager_factory(self.connector, objects.CALLER_IDENTITY, tenant_id)

    def create(self, data: ResourceData) -> str:
        """Create a network container.

        With ``allocate_prefix_len`` below 7 the container is created at
        ``cidr``; from 7 on it is allocated from the container at
        ``parent_cidr``.

        Returns:
            The object reference, also stored via ``data.set_id``

        Raises:
            ConfigError: ext_attrs is not valid JSON
            ValidationError: allocate_prefix_len or network_view invalid
            RemoteError: Connector call failed
        """
        config = NetworkContainerConfig.from_resource_data(data)
        ext_attrs = parse_ext_attrs(config.ext_attrs)
        tenant_id = tenant_id_from(ext_attrs)

        prefix_len = config.allocate_prefix_len
        if prefix_len != 0 and prefix_len < allocators.MIN_PREFIX_LEN:
            raise ValidationError(
                details=f"allocate_prefix_len must be at least {allocators.MIN_PREFIX_LEN}, got {prefix_len}"
            )
        if not config.network_view:
            raise ValidationError(
                details="network view's name is required to create a network container"
            )

        allocator = allocators.select_allocator(
            prefix_len, self._object_manager(tenant_id), self.family
        )
        LOG.info("Creating %s network container in network view %s using %s",
                 self.family.value, config.network_view, type(allocator).__name__)

        container = allocator.allocate(config, ext_attrs)
        data.set_id(container.ref)

        LOG.info("Created network container %s", container.ref)
        return container.ref

    def read(self, data: ResourceData) -> str:
        """Refresh the network container identified by ``data.id``.

        Not-found is reported as RemoteError; the host decides whether the
        container was deleted out of band.

        Raises:
            ConfigError: ext_attrs is not valid JSON
            RemoteError: Connector call failed
        """
        ext_attrs = parse_ext_attrs(data.get("ext_attrs") or "")
        object_manager = self._object_manager(tenant_id_from(ext_attrs))

        try:
            container = object_manager.get_network_container_by_ref(data.id)
        except ConnectorError as e:
            LOG.error("Failed to read network container %s: %s", data.id, e)
            raise RemoteError(details=f"failed to retrieve network container: {e}")

        data.set_id(container.ref)
        return container.ref

    def update(self, data: ResourceData) -> str:
        """Update comment and extensible attributes.

        ``network_view`` is immutable. ``cidr`` is required but not sent to
        the grid.

        Raises:
            ConfigError: ext_attrs is not valid JSON
            ValidationError: network_view changed, or network_view/cidr empty
            RemoteError: Connector call failed
        """
        config = NetworkContainerConfig.from_resource_data(data)
        # Malformed ext_attrs is reported ahead of a network_view change
        ext_attrs = parse_ext_attrs(config.ext_attrs)

        if data.has_change("network_view"):
            raise ValidationError(
                details="changing the value of 'network_view' field is not allowed"
            )
        if not config.cidr or not config.network_view:
            raise ValidationError(
                details="network view's name and CIDR are required to update a network container"
            )

        object_manager = self._object_manager(tenant_id_from(ext_attrs))

        comment = ""
        comment_text, comment_found = data.get_ok("comment")
        if comment_found:
            comment = comment_text

        try:
            container = object_manager.update_network_container(data.id, ext_attrs, comment)
        except ConnectorError as e:
            LOG.error("Failed to update network container %s: %s", data.id, e)
            raise RemoteError(
                details=(
                    f"failed to update the network container in network view "
                    f"'{config.network_view}': {e}"
                )
            )

        data.set_id(container.ref)
        LOG.info("Updated network container %s", container.ref)
        return container.ref

    def delete(self, data: ResourceData) -> None:
        """Delete the network container identified by ``data.id``.

        The host clears the identifier once this returns.

        Raises:
            ConfigError: ext_attrs is not valid JSON
            RemoteError: Connector call failed
        """
        ext_attrs = parse_ext_attrs(data.get("ext_attrs") or "")
        object_manager = self._object_manager(tenant_id_from(ext_attrs))

        try:
            object_manager.delete_network_container(data.id)
        except ConnectorError as e:
            LOG.error("Failed to delete network container %s: %s", data.id, e)
            raise RemoteError(details=f"deletion of the network container failed: {e}")

        LOG.info("Deleted network container %s", data.id)


def ipv4_network_container(connector, **kwargs) -> NetworkContainerResource:
    return NetworkContainerResource(objects.AddressFamily.IPV4, connector, **kwargs)


def ipv6_network_container(connector, **kwargs) -> NetworkContainerResource:
    return NetworkContainerResource(objects.AddressFamily.IPV6, connector, **kwargs)
