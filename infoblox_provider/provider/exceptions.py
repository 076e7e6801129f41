"""Infoblox provider exceptions."""


class IpamProviderException(Exception):
    """Base exception for provider errors."""

    message = "An unknown exception occurred."

    def __init__(self, message=None, **kwargs):
        """Initialize exception with optional custom message."""
        self.kwargs = kwargs
        if message:
            self.message = message
        super(IpamProviderException, self).__init__(self.message % kwargs)


class ConfigError(IpamProviderException):
    """Resource configuration could not be decoded.

    Raised for malformed JSON in the ``ext_attrs`` field. Never retried.
    """

    message = "cannot process 'ext_attrs' field: %(details)s"


class ValidationError(IpamProviderException):
    """Local precondition violation. Never reaches the connector."""

    message = "%(details)s"


class RemoteError(IpamProviderException):
    """Connector failure wrapped with operation context."""

    message = "%(details)s"


class ProviderSetupError(IpamProviderException):
    """Provider configuration is missing or invalid."""

    message = "Provider setup failed: %(details)s"


class ConnectorError(IpamProviderException):
    """Base class for errors raised by the WAPI connector."""

    message = "Connector error: %(details)s"


class IpamAPIError(ConnectorError):
    """WAPI returned an error response."""

    message = "WAPI error: %(details)s"


class IpamAPIConnectionError(ConnectorError):
    """WAPI connection error."""

    message = "Failed to connect to WAPI: %(details)s"


class IpamAPITimeout(ConnectorError):
    """WAPI timeout error."""

    message = "WAPI request timed out after %(timeout)s seconds"


class IpamObjectNotFound(ConnectorError):
    """Object reference does not exist on the grid."""

    message = "Object %(ref)s not found"


class NetworkContainerNotFound(ConnectorError):
    """No network container matched a lookup by view and CIDR."""

    message = "Network container %(cidr)s not found in network view %(network_view)s"
