"""
Integration tests for CLI network container commands.
"""

from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from infoblox_provider.cli.cli import app
from infoblox_provider.cli.lib import state
from infoblox_provider.provider import exceptions

CONTAINER_REF = "networkcontainer/ZG5zLm5ldHdvcmtfY29udGFpbmVyJDEw:10.0.0.0/24/default"


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, temp_dir):
    monkeypatch.setenv("INFOBLOX_STATE_DIR", str(temp_dir))
    monkeypatch.setenv("INFOBLOX_PROVIDER_CONFIG", str(temp_dir / "missing.conf"))
    with patch("infoblox_provider.cli.commands.container.logging.setup"):
        yield temp_dir


@pytest.fixture
def mock_resource():
    resource = Mock()

    def _create(data):
        data.set_id(CONTAINER_REF)
        return CONTAINER_REF

    resource.create.side_effect = _create
    resource.read.return_value = CONTAINER_REF
    resource.update.return_value = CONTAINER_REF
    resource.delete.return_value = None
    with patch("infoblox_provider.cli.commands.container._resource", return_value=resource) as mock_factory:
        resource.factory = mock_factory
        yield resource


def _seed(temp_dir, **config):
    base = {"network_view": "default", "cidr": "10.0.0.0/24"}
    base.update(config)
    state.upsert_container(temp_dir, {"name": "web", "family": "ipv4", "id": CONTAINER_REF, "config": base})


class TestContainerCreate:
    """Tests for container create command."""

    @pytest.mark.integration
    def test_create_direct(self, mock_resource, cli_env):
        runner = CliRunner()
        result = runner.invoke(
            app, ["container", "create", "web", "--network-view", "default", "--cidr", "10.0.0.0/24"]
        )

        assert result.exit_code == 0
        assert "Creating ipv4 network container: web" in result.output
        assert CONTAINER_REF in result.output

        data = mock_resource.create.call_args[0][0]
        assert data.get("network_view") == "default"
        assert data.get("cidr") == "10.0.0.0/24"
        assert data.get("allocate_prefix_len") == 0
        assert mock_resource.factory.call_args[0][1] == "ipv4"

        item = state.get_container(cli_env, "web")
        assert item["id"] == CONTAINER_REF
        assert item["family"] == "ipv4"

    @pytest.mark.integration
    def test_create_from_parent_ipv6(self, mock_resource, cli_env):
        runner = CliRunner()
        result = runner.invoke(
            app,
            [
                "container", "create", "lab", "--ipv6",
                "--network-view", "default",
                "--parent-cidr", "2001:db8::/32",
                "--prefix-len", "48",
            ],
        )

        assert result.exit_code == 0
        data = mock_resource.create.call_args[0][0]
        assert data.get("parent_cidr") == "2001:db8::/32"
        assert data.get("allocate_prefix_len") == 48
        assert mock_resource.factory.call_args[0][1] == "ipv6"

    @pytest.mark.integration
    def test_allocated_container_can_be_updated(self, mock_resource, cli_env):
        runner = CliRunner()
        result = runner.invoke(
            app,
            [
                "container", "create", "app",
                "--network-view", "default",
                "--parent-cidr", "10.0.0.0/16",
                "--prefix-len", "24",
            ],
        )
        assert result.exit_code == 0
        assert state.get_container(cli_env, "app")["config"]["cidr"] == "10.0.0.0/24"

        result = runner.invoke(app, ["container", "update", "app", "--comment", "app tier"])

        assert result.exit_code == 0
        data = mock_resource.update.call_args[0][0]
        assert data.get("cidr") == "10.0.0.0/24"
        assert data.get("comment") == "app tier"
        assert not data.has_change("network_view")

    @pytest.mark.integration
    def test_create_existing_name_fails(self, mock_resource, cli_env):
        _seed(cli_env)
        runner = CliRunner()
        result = runner.invoke(
            app, ["container", "create", "web", "--network-view", "default", "--cidr", "10.0.0.0/24"]
        )

        assert result.exit_code == 1
        assert "already exists" in result.output
        mock_resource.create.assert_not_called()

    @pytest.mark.integration
    def test_create_validation_error_not_persisted(self, mock_resource, cli_env):
        mock_resource.create.side_effect = exceptions.ValidationError(
            details="allocate_prefix_len must be at least 2, got 1"
        )
        runner = CliRunner()
        result = runner.invoke(
            app,
            ["container", "create", "web", "--network-view", "default", "--cidr", "10.0.0.0/24", "--prefix-len", "1"],
        )

        assert result.exit_code == 1
        assert "Error creating network container" in result.output
        assert state.get_container(cli_env, "web") is None

    @pytest.mark.integration
    def test_create_without_server_config_fails(self, cli_env):
        runner = CliRunner()
        result = runner.invoke(
            app, ["container", "create", "web", "--network-view", "default", "--cidr", "10.0.0.0/24"]
        )

        assert result.exit_code == 1
        assert "infoblox_server must be set" in result.output


class TestContainerUpdate:
    """Tests for container update command."""

    @pytest.mark.integration
    def test_update_merges_over_stored_config(self, mock_resource, cli_env):
        _seed(cli_env, comment="old")
        runner = CliRunner()
        result = runner.invoke(app, ["container", "update", "web", "--comment", "web tier"])

        assert result.exit_code == 0
        data = mock_resource.update.call_args[0][0]
        assert data.id == CONTAINER_REF
        assert data.get("comment") == "web tier"
        assert data.get("cidr") == "10.0.0.0/24"
        assert data.has_change("comment") is True
        assert data.has_change("network_view") is False

        assert state.get_container(cli_env, "web")["config"]["comment"] == "web tier"

    @pytest.mark.integration
    def test_update_reports_network_view_change(self, mock_resource, cli_env):
        _seed(cli_env)
        mock_resource.update.side_effect = exceptions.ValidationError(
            details="changing the value of 'network_view' field is not allowed"
        )
        runner = CliRunner()
        result = runner.invoke(app, ["container", "update", "web", "--network-view", "other"])

        assert result.exit_code == 1
        assert mock_resource.update.call_args[0][0].has_change("network_view") is True
        assert state.get_container(cli_env, "web")["config"]["network_view"] == "default"

    @pytest.mark.integration
    def test_update_unknown_name(self, mock_resource, cli_env):
        runner = CliRunner()
        result = runner.invoke(app, ["container", "update", "missing", "--comment", "x"])

        assert result.exit_code == 1
        assert "not found in state" in result.output


class TestContainerShowDelete:
    """Tests for container show, delete and list commands."""

    @pytest.mark.integration
    def test_show_refreshes_reference(self, mock_resource, cli_env):
        _seed(cli_env)
        mock_resource.read.return_value = "networkcontainer/refreshed"
        runner = CliRunner()
        result = runner.invoke(app, ["container", "show", "web"])

        assert result.exit_code == 0
        assert "ref=networkcontainer/refreshed" in result.output
        assert state.get_container(cli_env, "web")["id"] == "networkcontainer/refreshed"

    @pytest.mark.integration
    def test_delete_removes_state(self, mock_resource, cli_env):
        _seed(cli_env, ext_attrs='{"Tenant ID": "acme"}')
        runner = CliRunner()
        result = runner.invoke(app, ["container", "delete", "web"])

        assert result.exit_code == 0
        data = mock_resource.delete.call_args[0][0]
        assert data.id == CONTAINER_REF
        assert data.get("ext_attrs") == '{"Tenant ID": "acme"}'
        assert state.get_container(cli_env, "web") is None

    @pytest.mark.integration
    def test_delete_failure_keeps_state(self, mock_resource, cli_env):
        _seed(cli_env)
        mock_resource.delete.side_effect = exceptions.RemoteError(
            details="deletion of the network container failed: in use"
        )
        runner = CliRunner()
        result = runner.invoke(app, ["container", "delete", "web"])

        assert result.exit_code == 1
        assert "in use" in result.output
        assert state.get_container(cli_env, "web") is not None

    @pytest.mark.integration
    def test_list(self, cli_env):
        runner = CliRunner()
        result = runner.invoke(app, ["container", "list"])
        assert result.exit_code == 0
        assert "No network containers found" in result.output

        _seed(cli_env)
        result = runner.invoke(app, ["container", "list"])
        assert result.exit_code == 0
        assert "web family=ipv4 view=default cidr=10.0.0.0/24" in result.output
