"""Tenant-scoped network container operations on top of the WAPI client."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import unquote

from oslo_log import log as logging

from .exceptions import IpamAPIError, NetworkContainerNotFound

LOG = logging.getLogger(__name__)

# Caller identity stamped on every object this provider creates
CALLER_IDENTITY = "Terraform"

TENANT_ID_EA = "Tenant ID"
CMP_TYPE_EA = "CMP Type"

_RETURN_FIELDS = ["network_view", "network", "comment", "extattrs"]


class AddressFamily(Enum):
    """Address family of a network container."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def is_ipv6(self) -> bool:
        return self is AddressFamily.IPV6

    @property
    def object_type(self) -> str:
        """WAPI object type for containers of this family."""
        return "ipv6networkcontainer" if self.is_ipv6 else "networkcontainer"

    @classmethod
    def from_is_ipv6(cls, is_ipv6: bool) -> "AddressFamily":
        return cls.IPV6 if is_ipv6 else cls.IPV4


@dataclass
class NetworkContainer:
    """Network container as returned by the WAPI.

    Attributes:
        ref: Object reference, used as the persisted resource identifier
        network_view: Network view the container lives in
        cidr: Address block in CIDR notation
        comment: Free-text description
        ext_attrs: Extensible attributes as a flat name -> value mapping
    """

    ref: str
    network_view: str = ""
    cidr: str = ""
    comment: str = ""
    ext_attrs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_wapi(cls, obj: Dict[str, Any]) -> "NetworkContainer":
        if not isinstance(obj, dict) or not obj.get("_ref"):
            raise IpamAPIError(details=f"malformed network container object: {obj!r}")
        return cls(
            ref=obj["_ref"],
            network_view=obj.get("network_view", ""),
            cidr=obj.get("network", ""),
            comment=obj.get("comment", ""),
            ext_attrs=from_wapi_ext_attrs(obj.get("extattrs")),
        )


def cidr_from_ref(ref: str) -> str:
    """Address block encoded in a container reference, or "" if there is none.

    References look like ``networkcontainer/<id>:10.0.0.0/24/default``; IPv6
    addresses are percent-encoded.
    """
    _, sep, tail = ref.partition(":")
    parts = tail.split("/", 2)
    if not sep or len(parts) < 2 or not parts[0] or not parts[1]:
        return ""
    return f"{unquote(parts[0])}/{parts[1]}"


def to_wapi_ext_attrs(ext_attrs: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Convert a flat attribute mapping to the WAPI ``{"name": {"value": v}}`` form."""
    return {name: {"value": value} for name, value in ext_attrs.items()}


def from_wapi_ext_attrs(ext_attrs: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Flatten WAPI extensible attributes to a name -> value mapping."""
    if not ext_attrs:
        return {}
    return {name: attr.get("value") for name, attr in ext_attrs.items()}


class ObjectManager:
    """Network container operations scoped to one tenant.

    Every object created or updated through this manager carries the caller
    identity (``CMP Type``) and the tenant (``Tenant ID``) as extensible
    attributes. Attributes supplied by the user take precedence.
    """

    def __init__(self, connector, cmp_type: str = CALLER_IDENTITY, tenant_id: str = ""):
        """Initialize the object manager.

        Args:
            connector: WapiClient (or compatible) performing the HTTP calls
            cmp_type: Caller identity recorded on created objects
            tenant_id: Tenant scope, empty for no tenant
        """
        self.connector = connector
        self.cmp_type = cmp_type
        self.tenant_id = tenant_id

    def _scoped_ext_attrs(self, ext_attrs: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        scoped: Dict[str, Any] = {CMP_TYPE_EA: self.cmp_type}
        if self.tenant_id:
            scoped[TENANT_ID_EA] = self.tenant_id
        scoped.update(ext_attrs or {})
        return scoped

    def _to_container(self, result) -> NetworkContainer:
        # Without _return_fields the WAPI answers with the bare reference
        if isinstance(result, str):
            return NetworkContainer(ref=result)
        return NetworkContainer.from_wapi(result)

    def create_network_container(
        self,
        network_view: str,
        cidr: str,
        is_ipv6: bool,
        comment: str,
        ext_attrs: Optional[Dict[str, Any]],
    ) -> NetworkContainer:
        """Create a network container at an explicit CIDR.

        Raises:
            ConnectorError: WAPI call failed
        """
        family = AddressFamily.from_is_ipv6(is_ipv6)
        payload = {
            "network_view": network_view,
            "network": cidr,
            "comment": comment,
            "extattrs": to_wapi_ext_attrs(self._scoped_ext_attrs(ext_attrs)),
        }
        result = self.connector.create(family.object_type, payload, return_fields=_RETURN_FIELDS)
        container = self._to_container(result)
        LOG.info("Created %s container %s in network view %s", family.value, cidr, network_view)
        return container

    def get_network_container(
        self,
        network_view: str,
        cidr: str,
        is_ipv6: bool,
        ext_attrs: Optional[Dict[str, Any]] = None,
    ) -> NetworkContainer:
        """Look up a network container by network view and CIDR.

        Args:
            ext_attrs: Optional attribute filters (exact match)

        Raises:
            NetworkContainerNotFound: No container matched
            ConnectorError: WAPI call failed
        """
        family = AddressFamily.from_is_ipv6(is_ipv6)
        params: Dict[str, Any] = {"network_view": network_view, "network": cidr}
        for name, value in (ext_attrs or {}).items():
            params[f"*{name}"] = value

        result = self.connector.get(family.object_type, params=params, return_fields=_RETURN_FIELDS)
        if not result:
            raise NetworkContainerNotFound(cidr=cidr, network_view=network_view)
        return self._to_container(result[0])

    def allocate_network_container(
        self,
        network_view: str,
        parent_cidr: str,
        is_ipv6: bool,
        prefix_len: int,
        comment: str,
        ext_attrs: Optional[Dict[str, Any]],
    ) -> NetworkContainer:
        """Allocate the next available block of ``prefix_len`` from ``parent_cidr``.

        Raises:
            ConnectorError: WAPI call failed (e.g., parent exhausted)
        """
        family = AddressFamily.from_is_ipv6(is_ipv6)
        payload = {
            "network_view": network_view,
            "network": f"func:nextavailablenetwork:{parent_cidr},{network_view},{int(prefix_len)}",
            "comment": comment,
            "extattrs": to_wapi_ext_attrs(self._scoped_ext_attrs(ext_attrs)),
        }
        result = self.connector.create(family.object_type, payload, return_fields=_RETURN_FIELDS)
        container = self._to_container(result)
        LOG.info(
            "Allocated /%d %s container %s from %s in network view %s",
            prefix_len, family.value, container.cidr, parent_cidr, network_view,
        )
        return container

    def get_network_container_by_ref(self, ref: str) -> NetworkContainer:
        """Fetch a network container by reference.

        Raises:
            IpamObjectNotFound: Reference does not resolve
            ConnectorError: WAPI call failed
        """
        result = self.connector.get(ref, return_fields=_RETURN_FIELDS)
        return self._to_container(result)

    def update_network_container(
        self, ref: str, ext_attrs: Optional[Dict[str, Any]], comment: str
    ) -> NetworkContainer:
        """Replace comment and extensible attributes of a network container.

        Raises:
            ConnectorError: WAPI call failed
        """
        payload = {
            "comment": comment,
            "extattrs": to_wapi_ext_attrs(self._scoped_ext_attrs(ext_attrs)),
        }
        result = self.connector.update(ref, payload, return_fields=_RETURN_FIELDS)
        return self._to_container(result)

    def delete_network_container(self, ref: str) -> str:
        """Delete a network container.

        Returns:
            Reference of the deleted object

        Raises:
            ConnectorError: WAPI call failed
        """
        return self.connector.delete(ref)
