"""
Shared fixtures for the auth priority test suite.

Provides a populated in-memory credential store, a config store writing
to a temporary directory, the registry over both, and an async HTTP
client wrapping the management app via ASGITransport.
"""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport

from auth_priority.core.types import AuthEntry
from auth_priority.integration import create_app
from auth_priority.persistence import ConfigStore
from auth_priority.registry import AuthPriorityRegistry
from auth_priority.store import InMemoryCredentialStore


def make_entries():
    return [
        AuthEntry(id="a1", file_name="acct1.json", provider="claude", attributes={}),
        AuthEntry(
            id="a2",
            file_name="acct2.json",
            provider="codex",
            attributes={"priority": "7"},
        ),
        AuthEntry(
            id="claude:apikey:sk-ant-0123456789",
            provider="claude",
            attributes={"priority": "3"},
        ),
        AuthEntry(id="gemini-oauth-1.json", provider="gemini", attributes=None),
    ]


@pytest.fixture
def credential_store():
    return InMemoryCredentialStore(make_entries())


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.yaml"


@pytest.fixture
def config_store(config_path):
    return ConfigStore(str(config_path))


@pytest.fixture
def registry(credential_store, config_store):
    return AuthPriorityRegistry(credential_store, config_store)


@pytest_asyncio.fixture
async def test_client(registry):
    """Async HTTP client wrapping the management app."""
    transport = ASGITransport(app=create_app(registry))
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
