"""Pytest configuration and fixtures for provider unit tests."""

from unittest.mock import Mock

import pytest

from infoblox_provider.provider.objects import NetworkContainer
from infoblox_provider.provider.resource_data import DictResourceData


@pytest.fixture
def mock_provider_config():
    """Create a mock oslo.config-like configuration object for the provider."""
    config = Mock()

    config.infoblox_server = "gm.example.com"
    config.infoblox_port = 443
    config.infoblox_wapi_version = "2.7"
    config.infoblox_username = "admin"
    config.infoblox_password = "infoblox"
    config.infoblox_sslmode = False
    config.infoblox_ca_bundle = None
    config.infoblox_connect_timeout = 60
    config.infoblox_pool_connections = 10
    config.infoblox_retry_count = 3

    return config


@pytest.fixture
def mock_object_manager():
    """Create a mock tenant-scoped object manager."""
    manager = Mock()

    manager.create_network_container.return_value = NetworkContainer(
        ref="networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDEw:10.0.0.0/24/default",
        network_view="default",
        cidr="10.0.0.0/24",
    )
    manager.get_network_container.return_value = NetworkContainer(
        ref="networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDE2:10.0.0.0/16/default",
        network_view="default",
        cidr="10.0.0.0/16",
    )
    manager.allocate_network_container.return_value = NetworkContainer(
        ref="networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDI0:10.0.5.0/24/default",
        network_view="default",
        cidr="10.0.5.0/24",
    )
    manager.get_network_container_by_ref.return_value = NetworkContainer(
        ref="networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDEw:10.0.0.0/24/default",
    )
    manager.update_network_container.return_value = NetworkContainer(
        ref="networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDEw:10.0.0.0/24/default",
    )
    manager.delete_network_container.return_value = (
        "networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDEw:10.0.0.0/24/default"
    )

    return manager


@pytest.fixture
def mock_object_manager_factory(mock_object_manager):
    """Factory returning mock_object_manager, recording the tenant scope."""
    return Mock(return_value=mock_object_manager)


@pytest.fixture
def mock_connector():
    return Mock()


@pytest.fixture
def direct_config():
    return {
        "network_view": "default",
        "cidr": "10.0.0.0/24",
        "allocate_prefix_len": 0,
    }


@pytest.fixture
def parent_config():
    return {
        "network_view": "default",
        "cidr": "10.0.5.0/24",
        "parent_cidr": "10.0.0.0/16",
        "allocate_prefix_len": 24,
    }


@pytest.fixture
def make_data():
    """Build DictResourceData instances."""

    def _make(config, prior=None, resource_id=""):
        return DictResourceData(config, prior=prior, resource_id=resource_id)

    return _make
