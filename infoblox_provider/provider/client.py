"""REST client for the Infoblox WAPI."""

from typing import Any, Dict, List, Optional, Union

import requests
from oslo_log import log as logging
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import (
    IpamAPIConnectionError,
    IpamAPIError,
    IpamAPITimeout,
    IpamObjectNotFound,
)

LOG = logging.getLogger(__name__)

# WAPI error code suffix for references that no longer resolve
_NOT_FOUND_CODE_SUFFIX = "Data.NotFound"

WapiResult = Union[Dict[str, Any], List[Dict[str, Any]], str]


class WapiClient:
    """Authenticated REST client for the Infoblox WAPI.

    Every object on the grid is addressed either by its object type
    (``networkcontainer``) for searches and creation, or by its reference
    (``networkcontainer/ZG5z...:10.0.0.0/24/default``) for reads, updates
    and deletion. Both are plain path segments below the versioned base URL.
    """

    def __init__(
        self,
        server: str,
        username: str,
        password: str,
        port: int = 443,
        wapi_version: str = "2.7",
        timeout: int = 60,
        retry_count: int = 3,
        verify_ssl: bool = False,
        ca_bundle: Optional[str] = None,
        pool_connections: int = 10,
    ):
        """Initialize the WAPI client.

        Args:
            server: Grid Master host name or IP address
            username: WAPI user name
            password: WAPI password
            port: HTTPS port
            wapi_version: WAPI version (e.g., "2.7")
            timeout: HTTP request timeout in seconds
            retry_count: Number of retries for failed GET requests
            verify_ssl: Whether to verify SSL certificates
            ca_bundle: Path to CA bundle file for SSL verification
            pool_connections: Size of the HTTP connection pool

        Raises:
            ValueError: If server or credentials are missing
        """
        if not server:
            raise ValueError("server is required")
        if not username or not password:
            raise ValueError("username and password are required")

        self.base_url = f"https://{server}:{port}/wapi/v{wapi_version.lstrip('v')}"
        self.timeout = timeout
        self.retry_count = retry_count

        if ca_bundle:
            self.verify_ssl = ca_bundle
        else:
            self.verify_ssl = verify_ssl

        self.session = requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({"Content-Type": "application/json"})

        # Only GET is retried; a retried POST could allocate a second container
        retry_strategy = Retry(
            total=retry_count,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(
            pool_connections=pool_connections,
            pool_maxsize=pool_connections,
            max_retries=retry_strategy,
        )
        self.session.mount("https://", adapter)

    def _make_request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> WapiResult:
        """Make HTTP request to the WAPI.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Object type or object reference
            json_data: Request body as JSON
            params: Query parameters

        Returns:
            Decoded JSON response (object, list of objects or reference string)

        Raises:
            IpamAPIConnectionError: Connection failed
            IpamAPITimeout: Request timed out
            IpamObjectNotFound: Reference does not resolve
            IpamAPIError: WAPI returned any other error
        """
        url = f"{self.base_url}/{path.lstrip('/')}"

        LOG.debug("Making %s request to %s with params=%s, json_data=%s",
                  method, path, params, json_data)

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )

            LOG.debug("Response status: %s", response.status_code)

            if response.status_code >= 400:
                # WAPI errors look like {"Error": "...", "code": "...", "text": "..."}
                try:
                    error_data = response.json()
                    error_msg = error_data.get("text") or error_data.get("Error") or response.text
                    error_code = error_data.get("code") or ""
                except (ValueError, AttributeError):
                    # Non-JSON error response
                    error_msg = response.text
                    error_code = ""

                if response.status_code == 404 or error_code.endswith(_NOT_FOUND_CODE_SUFFIX):
                    LOG.warning("Object not found: %s, error: %s", path, error_msg)
                    raise IpamObjectNotFound(ref=path)

                LOG.error("WAPI error: HTTP %s, %s", response.status_code, error_msg)
                raise IpamAPIError(details=f"HTTP {response.status_code}: {error_msg}")

            return response.json()

        except requests.exceptions.Timeout:
            LOG.error("Request timeout after %ss: %s", self.timeout, path)
            raise IpamAPITimeout(timeout=self.timeout)
        except requests.exceptions.ConnectionError as e:
            LOG.error("Connection error: %s, %s", path, e)
            raise IpamAPIConnectionError(details=str(e))
        except requests.exceptions.RequestException as e:
            LOG.error("Request exception: %s, %s", path, e)
            raise IpamAPIError(details=str(e))

    @staticmethod
    def _return_fields(return_fields: Optional[List[str]]) -> Dict[str, str]:
        if not return_fields:
            return {}
        return {"_return_fields+": ",".join(return_fields)}

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        return_fields: Optional[List[str]] = None,
    ) -> WapiResult:
        """Search objects by type or fetch one object by reference.

        Args:
            path: Object type (returns a list) or reference (returns an object)
            params: Search filters (e.g., {"network_view": "default"})
            return_fields: Extra fields to include in the response

        Returns:
            List of objects for searches, a single object for references
        """
        query = dict(params or {})
        query.update(self._return_fields(return_fields))
        return self._make_request("GET", path, params=query)

    def create(
        self,
        obj_type: str,
        payload: Dict[str, Any],
        return_fields: Optional[List[str]] = None,
    ) -> WapiResult:
        """Create an object.

        Args:
            obj_type: WAPI object type (e.g., "networkcontainer")
            payload: Object fields
            return_fields: Extra fields to include in the response

        Returns:
            Created object when return_fields are requested, else its reference
        """
        result = self._make_request(
            "POST", obj_type, json_data=payload, params=self._return_fields(return_fields)
        )
        LOG.info("Created %s object", obj_type)
        return result

    def update(
        self,
        ref: str,
        payload: Dict[str, Any],
        return_fields: Optional[List[str]] = None,
    ) -> WapiResult:
        """Update the object at ``ref``.

        Returns:
            Updated object when return_fields are requested, else its reference
        """
        result = self._make_request(
            "PUT", ref, json_data=payload, params=self._return_fields(return_fields)
        )
        LOG.info("Updated object %s", ref)
        return result

    def delete(self, ref: str) -> str:
        """Delete the object at ``ref``.

        Returns:
            Reference of the deleted object
        """
        result = self._make_request("DELETE", ref)
        LOG.info("Deleted object %s", ref)
        return result
