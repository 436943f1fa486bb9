"""API Client for the Open Banking UK Account & Transaction (AISP) API."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from obcli.core.config import DEFAULT_BASE_URL
from obcli.core.errors import (
    AuthenticationError,
    AuthorizationError,
    InvalidRequestError,
    NotConfiguredError,
    NotFoundError,
    RateLimitError,
    RemoteAPIError,
    TransportError,
)

logger = logging.getLogger(__name__)


class APIClient:
    """HTTP client for the AISP endpoints.

    Every call is an authenticated GET. Responses arrive wrapped as
    ``{"Data": {"<Name>": [...]}}``; list calls return the inner array and
    single-record calls return its first element (or None).
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        """Make an authenticated request and return the decoded JSON body.

        Raises:
            NotConfiguredError: no token is set; nothing is sent
            TransportError: no response was received
            APIError subclasses: the API answered with a failure status
        """
        if not self.token:
            raise NotConfiguredError()

        url = f"{self.base_url}{endpoint}"
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        logger.debug("%s %s params=%s", method, endpoint, params or {})

        try:
            response = self.client.request(method, url, headers=headers, params=params or None)
        except httpx.TimeoutException as e:
            logger.debug("Request timed out: %s", e)
            raise TransportError(
                f"Request timed out after {int(self.timeout)}s. No response from Open Banking API."
            ) from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidRequestError(f"Invalid API base URL: {self.base_url} ({e})") from e
        except httpx.LocalProtocolError as e:
            raise InvalidRequestError(f"Malformed request: {e}") from e
        except httpx.TransportError as e:
            logger.debug("Transport failure: %s: %s", type(e).__name__, e)
            raise TransportError(
                "No response from Open Banking API. Check your internet connection."
            ) from e

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)

        if not response.is_success:
            self._raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteAPIError(
                response.status_code, f"Invalid JSON in response: {response.text[:200]}"
            ) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        status = response.status_code
        if status == 401:
            raise AuthenticationError()
        if status == 403:
            raise AuthorizationError()
        if status == 404:
            raise NotFoundError()
        if status == 429:
            raise RateLimitError()

        try:
            data = response.json()
        except ValueError:
            data = None

        message = None
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
        if not message:
            message = json.dumps(data, separators=(",", ":")) if data is not None else response.text
        raise RemoteAPIError(status, str(message), payload=data)

    @staticmethod
    def _path(template: str, **ids: str) -> str:
        """Fill path segments, percent-encoding each id."""
        encoded = {}
        for name, value in ids.items():
            if value is None or not str(value).strip():
                raise InvalidRequestError(f"Missing {name.replace('_', ' ')}.")
            encoded[name] = quote(str(value), safe="")
        return template.format(**encoded)

    @staticmethod
    def _date_params(from_date: Optional[str], to_date: Optional[str]) -> dict[str, str]:
        params = {}
        if from_date:
            params["fromBookingDateTime"] = from_date
        if to_date:
            params["toBookingDateTime"] = to_date
        return params

    @staticmethod
    def _unwrap_list(body: Any, name: str) -> list[Any]:
        data = body.get("Data") if isinstance(body, dict) else None
        items = data.get(name) if isinstance(data, dict) else None
        return items if isinstance(items, list) else []

    @classmethod
    def _unwrap_one(cls, body: Any, name: str) -> Optional[Any]:
        items = cls._unwrap_list(body, name)
        return items[0] if items else None

    # Accounts
    def list_accounts(self) -> list[dict]:
        return self._unwrap_list(self._request("GET", "/accounts"), "Account")

    def get_account(self, account_id: str) -> Optional[dict]:
        path = self._path("/accounts/{account_id}", account_id=account_id)
        return self._unwrap_one(self._request("GET", path), "Account")

    def get_account_balances(self, account_id: str) -> list[dict]:
        path = self._path("/accounts/{account_id}/balances", account_id=account_id)
        return self._unwrap_list(self._request("GET", path), "Balance")

    def get_account_transactions(
        self,
        account_id: str,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> list[dict]:
        path = self._path("/accounts/{account_id}/transactions", account_id=account_id)
        params = self._date_params(from_date, to_date)
        return self._unwrap_list(self._request("GET", path, params=params), "Transaction")

    # Balances
    def list_balances(self) -> list[dict]:
        return self._unwrap_list(self._request("GET", "/balances"), "Balance")

    # Transactions
    def list_transactions(
        self,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> list[dict]:
        params = self._date_params(from_date, to_date)
        return self._unwrap_list(self._request("GET", "/transactions", params=params), "Transaction")

    def get_transaction(self, account_id: str, transaction_id: str) -> Optional[dict]:
        path = self._path(
            "/accounts/{account_id}/transactions/{transaction_id}",
            account_id=account_id,
            transaction_id=transaction_id,
        )
        return self._unwrap_one(self._request("GET", path), "Transaction")

    # Beneficiaries
    def list_beneficiaries(self) -> list[dict]:
        return self._unwrap_list(self._request("GET", "/beneficiaries"), "Beneficiary")

    def get_account_beneficiaries(self, account_id: str) -> list[dict]:
        path = self._path("/accounts/{account_id}/beneficiaries", account_id=account_id)
        return self._unwrap_list(self._request("GET", path), "Beneficiary")

    # Direct debits
    def list_direct_debits(self) -> list[dict]:
        return self._unwrap_list(self._request("GET", "/direct-debits"), "DirectDebit")

    def get_account_direct_debits(self, account_id: str) -> list[dict]:
        path = self._path("/accounts/{account_id}/direct-debits", account_id=account_id)
        return self._unwrap_list(self._request("GET", path), "DirectDebit")

    # Standing orders
    def list_standing_orders(self) -> list[dict]:
        return self._unwrap_list(self._request("GET", "/standing-orders"), "StandingOrder")

    def get_account_standing_orders(self, account_id: str) -> list[dict]:
        path = self._path("/accounts/{account_id}/standing-orders", account_id=account_id)
        return self._unwrap_list(self._request("GET", path), "StandingOrder")

    # Statements
    def list_statements(self, account_id: str) -> list[dict]:
        path = self._path("/accounts/{account_id}/statements", account_id=account_id)
        return self._unwrap_list(self._request("GET", path), "Statement")

    def get_statement(self, account_id: str, statement_id: str) -> Optional[dict]:
        path = self._path(
            "/accounts/{account_id}/statements/{statement_id}",
            account_id=account_id,
            statement_id=statement_id,
        )
        return self._unwrap_one(self._request("GET", path), "Statement")

    def get_statement_transactions(self, account_id: str, statement_id: str) -> list[dict]:
        path = self._path(
            "/accounts/{account_id}/statements/{statement_id}/transactions",
            account_id=account_id,
            statement_id=statement_id,
        )
        return self._unwrap_list(self._request("GET", path), "Transaction")
