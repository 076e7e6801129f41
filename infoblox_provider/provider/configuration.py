"""Configuration options for the Infoblox provider."""

from oslo_config import cfg


# Configuration group name
CONF_GROUP = "infoblox"


def _get_infoblox_opts():
    """Get Infoblox provider configuration options.

    Returns:
        List of oslo_config options
    """
    return [
        # Grid connection
        cfg.StrOpt(
            "infoblox_server",
            default=None,
            help="Grid Master host name or IP address (e.g., gm.example.com)",
        ),
        cfg.PortOpt(
            "infoblox_port",
            default=443,
            help="HTTPS port of the WAPI endpoint",
        ),
        cfg.StrOpt(
            "infoblox_wapi_version",
            default="2.7",
            help="WAPI version used to build request URLs (e.g., 2.7 -> /wapi/v2.7)",
        ),
        # Authentication
        cfg.StrOpt(
            "infoblox_username",
            default=None,
            help="WAPI user name (HTTP Basic Auth)",
        ),
        cfg.StrOpt(
            "infoblox_password",
            default=None,
            secret=True,
            help="WAPI password (HTTP Basic Auth)",
        ),
        # TLS
        cfg.BoolOpt(
            "infoblox_sslmode",
            default=False,
            help="Verify the Grid Master SSL certificate",
        ),
        cfg.StrOpt(
            "infoblox_ca_bundle",
            default=None,
            help=(
                "Path to CA bundle file for SSL verification (optional). "
                "Implies certificate verification."
            ),
        ),
        # Transport
        cfg.IntOpt(
            "infoblox_connect_timeout",
            default=60,
            min=1,
            max=600,
            help="WAPI request timeout in seconds",
        ),
        cfg.IntOpt(
            "infoblox_pool_connections",
            default=10,
            min=1,
            max=100,
            help="Maximum number of pooled HTTP connections to the Grid Master",
        ),
        cfg.IntOpt(
            "infoblox_retry_count",
            default=3,
            min=0,
            max=10,
            help=(
                "Number of retries for idempotent (GET) requests on transient "
                "failures. Write requests are never retried."
            ),
        ),
    ]


def register_opts(conf, group=None):
    """Register Infoblox provider configuration options.

    Args:
        conf: oslo_config.cfg.ConfigOpts instance
        group: Configuration group name (default: CONF_GROUP)
    """
    opts = _get_infoblox_opts()
    if group is None:
        group = CONF_GROUP

    conf.register_opts(opts, group=group)


def list_opts():
    """Return a list of provider options for oslo-config-generator.

    Returns:
        List of (group_name, options) tuples
    """
    return [
        (CONF_GROUP, _get_infoblox_opts()),
    ]


def get_infoblox_opts():
    """Get Infoblox provider configuration options (public API)."""
    return _get_infoblox_opts()
