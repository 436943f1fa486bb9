"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx
import pytest

from obcli.core.api_client import APIClient
from obcli.core.config import CLIConfig
from obcli.core.settings import SettingsStore
from obcli.main import run

BASE_URL = "https://bank.test/open-banking/v3.1/aisp"
BASE_PATH = "/open-banking/v3.1/aisp"


class FakeBank:
    """In-process stand-in for the AISP API, served through httpx.MockTransport."""

    def __init__(self):
        self.routes: dict[str, httpx.Response] = {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def add(
        self,
        path: str,
        json: Any = None,
        status: int = 200,
        text: Optional[str] = None,
    ) -> None:
        if text is not None:
            self.routes[path] = httpx.Response(status, text=text)
        else:
            self.routes[path] = httpx.Response(status, json=json)

    def envelope(self, path: str, name: str, items: list[dict]) -> None:
        self.add(path, json={"Data": {name: items}, "Links": {"Self": path}, "Meta": {}})

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(BASE_PATH):
            path = path[len(BASE_PATH):]
        response = self.routes.get(path)
        if response is None:
            return httpx.Response(404, json={"message": "no such route"})
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def now_ms() -> int:
    return int(time.time() * 1000)


@pytest.fixture
def bank():
    """A fake bank with no routes; every call 404s until routes are added."""
    return FakeBank()


@pytest.fixture
def settings(tmp_path):
    """An empty settings store in a temporary directory."""
    return SettingsStore(tmp_path / "config.json")


@pytest.fixture
def configured_settings(settings):
    """A settings store holding a token that expires in an hour."""
    settings.set("accessToken", "test-token")
    settings.set("tokenExpiry", now_ms() + 3_600_000)
    return settings


@pytest.fixture
def config(tmp_path):
    return CLIConfig(base_url=BASE_URL, config_dir=tmp_path, timeout=5.0)


@pytest.fixture
def api(bank, configured_settings):
    client = APIClient(BASE_URL, token=configured_settings.get("accessToken"), transport=bank.transport)
    yield client
    client.close()


@pytest.fixture
def cli(bank, config):
    """Run the CLI against the fake bank with whichever settings store is given."""

    def _run(argv: list[str], settings: SettingsStore) -> int:
        client = APIClient(
            BASE_URL,
            token=settings.get("accessToken"),
            transport=bank.transport,
        )
        return run(argv, config=config, settings=settings, api=client)

    return _run


@pytest.fixture
def sample_accounts():
    return [
        {
            "AccountId": "22289",
            "Currency": "GBP",
            "AccountType": "Personal",
            "AccountSubType": "CurrentAccount",
            "Nickname": "Bills",
        },
        {
            "AccountId": "31820",
            "Currency": "GBP",
            "AccountType": "Personal",
            "AccountSubType": "Savings",
            "Nickname": "Household",
        },
    ]


@pytest.fixture
def sample_transactions():
    return [
        {
            "AccountId": "22289",
            "TransactionId": "123456789012345",
            "BookingDateTime": "2024-01-15T10:30:00+00:00",
            "Amount": {"Amount": "10.00", "Currency": "GBP"},
            "CreditDebitIndicator": "Debit",
            "Status": "Booked",
        },
        {
            "AccountId": "22289",
            "TransactionId": "T2",
            "BookingDateTime": "2024-01-20T08:00:00+00:00",
            "Amount": {"Amount": "250.00", "Currency": "GBP"},
            "CreditDebitIndicator": "Credit",
            "Status": "Pending",
        },
    ]


@pytest.fixture
def sample_balances():
    return [
        {
            "AccountId": "22289",
            "Type": "InterimAvailable",
            "Amount": {"Amount": "1230.00", "Currency": "GBP"},
            "CreditDebitIndicator": "Credit",
            "DateTime": "2024-01-31T12:00:00+00:00",
        },
    ]
