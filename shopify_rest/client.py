"""
Main ShopifyClient class for interacting with the Shopify REST Admin API.
"""

import logging
from typing import Dict, Any, Optional, List, Tuple

import requests

from .config import Settings
from .constants import (
    REQUEST_TIMEOUT,
    SUPPORTED_METHODS,
    JSON_HEADERS,
    ERROR_MESSAGES,
)
from .exceptions import (
    ShopifyAPIError,
    ValidationError,
    SerializationError,
    ConnectionError,
)
from .utils import (
    normalize_store,
    is_valid_store,
    has_unsafe_url_chars,
    build_target_url,
    to_json_bytes,
    redact_url,
)

logger = logging.getLogger(__name__)

Result = Tuple[Optional[bytes], List[ShopifyAPIError]]


class ShopifyClient:
    """
    Client for the Shopify REST Admin API using private app credentials.

    Every call returns a (body, errors) pair. The body is the raw response
    payload, whatever the HTTP status; errors holds local serialization or
    transport failures and is empty on success.

    Example:
        client = ShopifyClient("mystore", "XXX", "YYY")
        body, errors = client.get("products/5")
    """

    def __init__(self, store: str, api_key: str, password: str,
                 timeout: float = REQUEST_TIMEOUT):
        """
        Initialize the Shopify client.

        Args:
            store (str): Store name (e.g., 'mystore' or 'mystore.myshopify.com')
            api_key (str): Private app API key
            password (str): Private app password
            timeout (float): Seconds the transport waits before giving up

        Raises:
            ValidationError: If any credential is empty or would not survive
                being embedded in the URL
        """
        store = normalize_store(store)
        if not store:
            raise ValidationError(ERROR_MESSAGES['empty_store'], field="store")
        if not is_valid_store(store):
            raise ValidationError(ERROR_MESSAGES['invalid_store'], field="store")
        if not api_key:
            raise ValidationError(ERROR_MESSAGES['empty_api_key'], field="api_key")
        if not password:
            raise ValidationError(ERROR_MESSAGES['empty_password'], field="password")
        for name, value in (("api_key", api_key), ("password", password)):
            if has_unsafe_url_chars(value):
                raise ValidationError(ERROR_MESSAGES['unsafe_credential'], field=name)

        self._store = store
        self._api_key = api_key
        self._password = password
        self._timeout = timeout

        logger.info(f"ShopifyClient initialized for {store}")

    @classmethod
    def from_env(cls, settings: Optional[Settings] = None) -> "ShopifyClient":
        """
        Build a client from SHOPIFY_STORE, SHOPIFY_API_KEY and SHOPIFY_PASSWORD.

        Raises:
            ValueError: If a required variable is missing
        """
        settings = settings or Settings()
        settings.validate_required_vars()
        return cls(
            store=settings.store,
            api_key=settings.api_key,
            password=settings.password,
            timeout=settings.request_timeout,
        )

    @property
    def store(self) -> str:
        return self._store

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def password(self) -> str:
        return self._password

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self):
        return f"ShopifyClient(store={self._store!r}, api_key={self._api_key!r}, password='***')"

    def build_url(self, endpoint: str, parameters: Optional[Dict[str, Any]] = None) -> str:
        """
        Build the target URL for an endpoint.

        Args:
            endpoint (str): Endpoint path such as 'products' or 'orders/5/transactions'
            parameters (Dict[str, Any], optional): Query parameters

        Returns:
            str: Full URL with embedded credentials
        """
        return build_target_url(self._store, self._api_key, self._password,
                                endpoint, parameters)

    def _send(self, method: str, url: str, body: Optional[bytes] = None) -> Result:
        """
        Issue a single HTTP call.

        Status codes are not inspected: 4xx and 5xx bodies come back like any
        other. Only transport failures end up in the error list.
        """
        logger.info(f"Making {method} request to {redact_url(url)}")
        if body is not None:
            logger.debug(f"Request payload: {len(body)} bytes")

        try:
            response = requests.request(
                method=method,
                url=url,
                data=body,
                headers=JSON_HEADERS if body is not None else None,
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"{method} {redact_url(url)} timed out after {self._timeout}s")
            return None, [ConnectionError(f"Request timeout after {self._timeout}s", original=e)]
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {redact_url(url)} failed: {type(e).__name__}")
            return None, [ConnectionError(ERROR_MESSAGES['connection_failed'], original=e)]

        logger.debug(f"Response status: {response.status_code}")
        return response.content, []

    def request(self, method: str, endpoint: str, data: Any = None) -> Result:
        """
        Make a request with any supported method.

        A body that cannot be serialized is dropped with a warning and the
        call goes out without one; use post/put to fail fast instead.

        Args:
            method (str): GET, POST, PUT or DELETE (case-insensitive)
            endpoint (str): Target endpoint like "products"
            data (Any, optional): Content to be sent with the request

        Returns:
            Result: (body, errors)
        """
        method = (method or "").upper()
        if method not in SUPPORTED_METHODS:
            return None, [ValidationError(f"{ERROR_MESSAGES['unsupported_method']}: {method!r}",
                                          field="method")]

        try:
            body = to_json_bytes(data)
        except SerializationError as e:
            logger.warning(f"Sending {method} {endpoint} without body: {e}")
            body = None

        return self._send(method, self.build_url(endpoint), body)

    def get(self, endpoint: str) -> Result:
        """
        Make a GET request to the given endpoint.

        Usage:
            client.get("products/5")
            client.get("products/5/variants")
        """
        return self.get_with_parameters(endpoint, None)

    def get_with_parameters(self, endpoint: str, parameters: Optional[Dict[str, Any]]) -> Result:
        """Make a GET request to the given endpoint with query parameters."""
        return self._send("GET", self.build_url(endpoint, parameters))

    def post(self, endpoint: str, data: Any) -> Result:
        """
        Make a POST request with a JSON body.

        Returns (None, [SerializationError]) without touching the network
        when data cannot be encoded.

        Usage:
            client.post("products", {"product": {"title": "Burton Custom"}})
        """
        return self._send_with_body("POST", endpoint, data)

    def put(self, endpoint: str, data: Any) -> Result:
        """
        Make a PUT request with a JSON body.

        Usage:
            client.put("products/5", {"product": {"id": 5, "title": "New title"}})
        """
        return self._send_with_body("PUT", endpoint, data)

    def delete(self, endpoint: str) -> Result:
        """
        Make a DELETE request to the given endpoint.

        Usage:
            client.delete("products/5")
        """
        return self._send("DELETE", self.build_url(endpoint))

    def _send_with_body(self, method: str, endpoint: str, data: Any) -> Result:
        url = self.build_url(endpoint)
        try:
            body = to_json_bytes(data)
        except SerializationError as e:
            logger.error(f"Not sending {method} {endpoint}: {e}")
            return None, [e]

        return self._send(method, url, body)
