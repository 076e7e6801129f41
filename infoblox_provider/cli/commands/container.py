"""
Network container management commands.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import typer
from oslo_config import cfg
from oslo_log import log as logging

from infoblox_provider.cli.lib.config import load_config
from infoblox_provider.cli.lib.state import delete_container as state_delete_container
from infoblox_provider.cli.lib.state import get_container as state_get_container
from infoblox_provider.cli.lib.state import get_state_dir
from infoblox_provider.cli.lib.state import list_containers as state_list_containers
from infoblox_provider.cli.lib.state import upsert_container as state_upsert_container
from infoblox_provider.provider.network_container import NetworkContainerResource
from infoblox_provider.provider.objects import cidr_from_ref
from infoblox_provider.provider.provider import InfobloxProvider
from infoblox_provider.provider.resource_data import DictResourceData

app = typer.Typer(help="Network container management commands")

CONFIG_FILE_OPTION = typer.Option(
    None, "--config-file", help="Provider configuration file (default: /etc/infoblox-provider/provider.conf)"
)


def _load(config_file: Optional[str]) -> Tuple[cfg.ConfigOpts, Path]:
    conf = load_config(config_file)
    logging.setup(conf, "infoblox-provider")
    return conf, get_state_dir(conf.cli.state_dir)


def _resource(conf: cfg.ConfigOpts, family: str) -> NetworkContainerResource:
    provider = InfobloxProvider(conf.infoblox)
    provider.do_setup()
    return provider.resource(f"infoblox_{family}_network_container")


def _require(state_dir: Path, name: str) -> Dict[str, Any]:
    item = state_get_container(state_dir, name)
    if item is None:
        raise ValueError(f"network container '{name}' not found in state")
    return item


@app.command()
def create(
    name: str = typer.Argument(..., help="Local resource name"),
    network_view: str = typer.Option(..., "--network-view", help="Network view name"),
    cidr: str = typer.Option("", "--cidr", help="Container address in CIDR format"),
    parent_cidr: str = typer.Option("", "--parent-cidr", help="Parent container to allocate from"),
    prefix_len: int = typer.Option(
        0, "--prefix-len", help="Allocate next available block of this prefix length from --parent-cidr (>= 7)"
    ),
    comment: str = typer.Option("", "--comment", help="Description"),
    ext_attrs: str = typer.Option("", "--ext-attrs", help='Extensible attributes as JSON, e.g. {"Tenant ID": "acme"}'),
    ipv6: bool = typer.Option(False, "--ipv6", help="Create an IPv6 network container"),
    config_file: Optional[str] = CONFIG_FILE_OPTION,
):
    """
    Create a network container.

    Creates the container at --cidr, or allocates one from --parent-cidr when
    --prefix-len is 7 or more.
    """
    try:
        conf, state_dir = _load(config_file)
        if state_get_container(state_dir, name) is not None:
            raise ValueError(f"network container '{name}' already exists in state")

        family = "ipv6" if ipv6 else "ipv4"
        config = {
            "network_view": network_view,
            "cidr": cidr,
            "parent_cidr": parent_cidr,
            "allocate_prefix_len": prefix_len,
            "comment": comment,
            "ext_attrs": ext_attrs,
        }

        typer.echo(f"Creating {family} network container: {name}")

        data = DictResourceData(config)
        ref = _resource(conf, family).create(data)
        if not config["cidr"]:
            # Allocated from a parent: keep the assigned block so updates have a CIDR
            config["cidr"] = cidr_from_ref(ref)

        state_upsert_container(state_dir, {"name": name, "family": family, "id": ref, "config": config})

        typer.echo(f"  Reference: {ref}")
        typer.echo(f"Network container {name} created successfully")

    except Exception as e:
        typer.echo(f"Error creating network container: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def show(
    name: str = typer.Argument(..., help="Local resource name"),
    config_file: Optional[str] = CONFIG_FILE_OPTION,
):
    """
    Refresh a network container from the grid and show its reference.
    """
    try:
        conf, state_dir = _load(config_file)
        item = _require(state_dir, name)

        data = DictResourceData(item["config"], resource_id=item["id"])
        ref = _resource(conf, item["family"]).read(data)

        item["id"] = ref
        state_upsert_container(state_dir, item)

        typer.echo(f"{name} family={item['family']} view={item['config'].get('network_view')} ref={ref}")

    except Exception as e:
        typer.echo(f"Error reading network container: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def update(
    name: str = typer.Argument(..., help="Local resource name"),
    network_view: Optional[str] = typer.Option(None, "--network-view", help="Network view name (immutable)"),
    cidr: Optional[str] = typer.Option(None, "--cidr", help="Container address in CIDR format"),
    comment: Optional[str] = typer.Option(None, "--comment", help="Description"),
    ext_attrs: Optional[str] = typer.Option(None, "--ext-attrs", help="Extensible attributes as JSON"),
    config_file: Optional[str] = CONFIG_FILE_OPTION,
):
    """
    Update comment and extensible attributes of a network container.

    Options not given keep their stored value.
    """
    try:
        conf, state_dir = _load(config_file)
        item = _require(state_dir, name)

        prior = dict(item["config"])
        config = dict(prior)
        for key, value in (
            ("network_view", network_view),
            ("cidr", cidr),
            ("comment", comment),
            ("ext_attrs", ext_attrs),
        ):
            if value is not None:
                config[key] = value

        typer.echo(f"Updating network container: {name}")

        data = DictResourceData(config, prior=prior, resource_id=item["id"])
        ref = _resource(conf, item["family"]).update(data)

        item.update({"id": ref, "config": config})
        state_upsert_container(state_dir, item)

        typer.echo(f"Network container {name} updated successfully")

    except Exception as e:
        typer.echo(f"Error updating network container: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def delete(
    name: str = typer.Argument(..., help="Local resource name"),
    config_file: Optional[str] = CONFIG_FILE_OPTION,
):
    """
    Delete a network container from the grid and forget it locally.
    """
    try:
        conf, state_dir = _load(config_file)
        item = _require(state_dir, name)

        typer.echo(f"Deleting network container: {name}")

        data = DictResourceData(item["config"], resource_id=item["id"])
        _resource(conf, item["family"]).delete(data)

        state_delete_container(state_dir, name)

        typer.echo(f"Network container {name} deleted successfully")

    except Exception as e:
        typer.echo(f"Error deleting network container: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="list")
def list_(
    config_file: Optional[str] = CONFIG_FILE_OPTION,
):
    """
    List network containers known to the local state.
    """
    try:
        _conf, state_dir = _load(config_file)
        items = state_list_containers(state_dir)
        if not items:
            typer.echo("No network containers found")
            return
        for item in items:
            config = item.get("config", {})
            typer.echo(
                f"{item.get('name')} family={item.get('family')} "
                f"view={config.get('network_view')} cidr={config.get('cidr') or '-'} ref={item.get('id')}"
            )

    except Exception as e:
        typer.echo(f"Error listing network containers: {e}", err=True)
        raise typer.Exit(1)
