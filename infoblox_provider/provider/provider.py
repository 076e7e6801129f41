"""Infoblox provider.

Holds the grid connection settings, builds the WAPI client once and hands
out the network container resources by resource type name.
"""

from typing import Dict, Optional

from oslo_log import log as logging

from . import client as wapi_client
from . import network_container
from .exceptions import ConnectorError, ProviderSetupError
from .objects import AddressFamily

LOG = logging.getLogger(__name__)

VERSION = "1.0.0"

RESOURCE_TYPES: Dict[str, AddressFamily] = {
    "infoblox_ipv4_network_container": AddressFamily.IPV4,
    "infoblox_ipv6_network_container": AddressFamily.IPV6,
}


class InfobloxProvider:
    """Infoblox IPAM provider.

    ``configuration`` is an object exposing the ``infoblox_*`` options, e.g.
    the ``infoblox`` group of an oslo.config ConfigOpts.

    Version history:
        1.0.0 - Initial implementation
    """

    VERSION = VERSION

    def __init__(self, configuration):
        self.configuration = configuration

        # WAPI client (initialized in do_setup)
        self.wapi_client: Optional[wapi_client.WapiClient] = None

        self._resources: Dict[str, network_container.NetworkContainerResource] = {}

    def do_setup(self):
        """Validate configuration and build the WAPI client.

        Raises:
            ProviderSetupError: Server or credentials missing or invalid
        """
        LOG.info("Initializing Infoblox provider version %s", self.VERSION)

        conf = self.configuration
        if not conf.infoblox_server:
            raise ProviderSetupError(details="infoblox_server must be set")
        if not conf.infoblox_username or not conf.infoblox_password:
            raise ProviderSetupError(
                details="infoblox_username and infoblox_password must be set"
            )

        try:
            self.wapi_client = wapi_client.WapiClient(
                server=conf.infoblox_server,
                username=conf.infoblox_username,
                password=conf.infoblox_password,
                port=conf.infoblox_port,
                wapi_version=conf.infoblox_wapi_version,
                timeout=conf.infoblox_connect_timeout,
                retry_count=conf.infoblox_retry_count,
                verify_ssl=conf.infoblox_sslmode,
                ca_bundle=conf.infoblox_ca_bundle,
                pool_connections=conf.infoblox_pool_connections,
            )
        except ValueError as e:
            LOG.exception("Failed to initialize Infoblox provider: %s", e)
            raise ProviderSetupError(details=str(e))

        self._resources = {
            name: network_container.NetworkContainerResource(family, self.wapi_client)
            for name, family in RESOURCE_TYPES.items()
        }

        LOG.info("Infoblox provider initialized for %s", self.wapi_client.base_url)

    def check_for_setup_error(self):
        """Check that the grid is reachable with the configured credentials.

        Raises:
            ProviderSetupError: Client not initialized or grid unreachable
        """
        if not self.wapi_client:
            raise ProviderSetupError(details="WAPI client not initialized")

        try:
            self.wapi_client.get("networkview", params={"_max_results": 1})
            LOG.debug("WAPI connectivity test passed")
        except ConnectorError as e:
            raise ProviderSetupError(details=f"failed to connect to WAPI: {e}")

    def resource(self, resource_type: str) -> network_container.NetworkContainerResource:
        """Resource implementation for ``resource_type``.

        Raises:
            ProviderSetupError: Provider not set up
            KeyError: Unknown resource type
        """
        if not self._resources:
            raise ProviderSetupError(details="provider is not set up, call do_setup() first")
        if resource_type not in self._resources:
            raise KeyError(f"unknown resource type: {resource_type}")
        return self._resources[resource_type]
