"""Network container resource schema and configuration parsing."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .exceptions import ConfigError
from .objects import TENANT_ID_EA
from .resource_data import ResourceData

# Recognized options: name -> (type, required, default, description)
NETWORK_CONTAINER_SCHEMA: Dict[str, Tuple[type, bool, Any, str]] = {
    "network_view": (
        str, True, None,
        "The name of network view for the network container.",
    ),
    "parent_cidr": (
        str, False, "",
        "The parent network container block in cidr format to allocate from.",
    ),
    "cidr": (
        str, True, None,
        "The network container's address, in CIDR format.",
    ),
    "allocate_prefix_len": (
        int, False, 0,
        "Set the parameter's value > 0 to allocate next available network with "
        "corresponding prefix length from the network container defined by 'parent_cidr'",
    ),
    "comment": (
        str, False, "",
        "A description of the network container.",
    ),
    "ext_attrs": (
        str, False, "",
        "The Extensible attributes of the network container to be added/updated, "
        "as a map in JSON format",
    ),
}


def schema_defaults() -> Dict[str, Any]:
    """Defaults of all optional options."""
    return {
        name: default
        for name, (_type, required, default, _desc) in NETWORK_CONTAINER_SCHEMA.items()
        if not required
    }


def parse_ext_attrs(ext_attrs_json: str) -> Dict[str, Any]:
    """Decode the JSON-encoded ``ext_attrs`` option.

    An empty string means no attributes.

    Raises:
        ConfigError: Malformed JSON or not a JSON object
    """
    if not ext_attrs_json:
        return {}
    try:
        ext_attrs = json.loads(ext_attrs_json)
    except ValueError as e:
        raise ConfigError(details=str(e))
    if not isinstance(ext_attrs, dict):
        raise ConfigError(details=f"expected a JSON object, got {type(ext_attrs).__name__}")
    return ext_attrs


def tenant_id_from(ext_attrs: Dict[str, Any]) -> str:
    """Tenant scope from the reserved ``Tenant ID`` attribute.

    Non-string values yield the empty scope.
    """
    tenant_id = ext_attrs.get(TENANT_ID_EA, "")
    return tenant_id if isinstance(tenant_id, str) else ""


@dataclass(frozen=True)
class NetworkContainerConfig:
    """Configuration snapshot of one network container resource."""

    network_view: str
    cidr: str
    parent_cidr: str = ""
    allocate_prefix_len: int = 0
    comment: str = ""
    ext_attrs: str = ""

    @classmethod
    def from_resource_data(cls, data: ResourceData) -> "NetworkContainerConfig":
        return cls(
            network_view=data.get("network_view") or "",
            cidr=data.get("cidr") or "",
            parent_cidr=data.get("parent_cidr") or "",
            allocate_prefix_len=int(data.get("allocate_prefix_len") or 0),
            comment=data.get("comment") or "",
            ext_attrs=data.get("ext_attrs") or "",
        )
