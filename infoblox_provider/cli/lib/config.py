"""
Configuration loader for the infoblox-nc CLI.

Provider options live in the ``[infoblox]`` group, CLI options in ``[cli]``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from oslo_config import cfg
from oslo_log import log as logging

from infoblox_provider.provider import configuration as provider_config

DEFAULT_CONFIG_PATH = Path("/etc/infoblox-provider/provider.conf")

CLI_GROUP = "cli"

_cli_opts = [
    cfg.StrOpt(
        "state_dir",
        default=None,
        help="Directory holding the resource state file (optional)",
    ),
]


def _config_path() -> Path:
    env = os.environ.get("INFOBLOX_PROVIDER_CONFIG")
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def load_config(config_file: Optional[str] = None, args: Optional[List[str]] = None) -> cfg.ConfigOpts:
    """
    Load config from:
    - ``config_file`` if given
    - else ``INFOBLOX_PROVIDER_CONFIG`` or ``/etc/infoblox-provider/provider.conf``

    A missing default file is not an error; option defaults are returned.
    """
    conf = cfg.ConfigOpts()
    provider_config.register_opts(conf)
    conf.register_opts(_cli_opts, group=CLI_GROUP)
    logging.register_options(conf)

    path = Path(config_file) if config_file else _config_path()
    config_files = [str(path)] if (config_file or path.exists()) else []

    conf(args=args or [], project="infoblox-provider", default_config_files=config_files)
    return conf
