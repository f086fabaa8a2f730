"""
Tests for priority updates through the registry.

Tests cover:
- Set / explicit zero / clear semantics
- Mirror keys for lookups by ID
- Not found, unavailable, store failure and persistence failure paths
- Concurrent updates to the same entry
"""

import asyncio

import pytest
import yaml

from auth_priority.core.errors import (
    AuthNotFoundError,
    CredentialStoreError,
    CredentialUpdateError,
    PersistenceError,
    RequestValidationError,
    ServiceUnavailableError,
)
from auth_priority.core.types import AuthEntry, PriorityUpdate
from auth_priority.persistence import ConfigStore
from auth_priority.registry import AuthPriorityRegistry, has_explicit_priority
from auth_priority.store import InMemoryCredentialStore


class RejectingStore(InMemoryCredentialStore):
    """Store whose update always fails."""

    async def update(self, entry):
        raise CredentialStoreError("store is read-only")


def read_document(path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


async def test_set_priority_updates_store_mirror_and_file(
    registry, credential_store, config_path
):
    entry = await registry.set_priority("acct1.json", 5)

    assert entry.attributes["priority"] == "5"
    assert entry.updated_at is not None
    stored = await credential_store.get("a1")
    assert stored.attributes["priority"] == "5"
    assert registry.mirror.as_dict() == {"acct1.json": 5}
    assert read_document(config_path) == {"auth-priority": {"acct1.json": 5}}
    assert await registry.list_priorities() == {
        "acct1.json": 5,
        "acct2.json": 7,
        "gemini-oauth-1.json": 0,
    }


async def test_explicit_zero_is_stored(registry, credential_store):
    await registry.set_priority("acct2.json", 0)

    stored = await credential_store.get("a2")
    assert stored.attributes["priority"] == "0"
    assert has_explicit_priority(stored.attributes)
    assert (await registry.list_priorities())["acct2.json"] == 0
    assert registry.mirror.get("acct2.json") == 0


async def test_clear_removes_attribute_and_mirror_key(
    registry, credential_store, config_path
):
    await registry.set_priority("acct2.json", 3)
    await registry.set_priority("acct2.json", None)

    stored = await credential_store.get("a2")
    assert not has_explicit_priority(stored.attributes)
    assert (await registry.list_priorities())["acct2.json"] == 0
    assert "acct2.json" not in registry.mirror
    # Emptied mirror is dropped, not left as {}
    assert registry.config_store.config.auth_priority is None
    assert "auth-priority" not in (read_document(config_path) or {})


async def test_clear_keeps_other_mirror_entries(registry):
    await registry.set_priority("acct1.json", 1)
    await registry.set_priority("acct2.json", 2)
    await registry.set_priority("acct1.json", PriorityUpdate.clear())

    assert registry.config_store.config.auth_priority == {"acct2.json": 2}


async def test_clear_without_prior_priority(registry, credential_store):
    await registry.set_priority("acct1.json", None)

    stored = await credential_store.get("a1")
    assert stored.attributes == {}
    assert registry.config_store.config.auth_priority is None


async def test_entry_without_attributes_is_initialized(registry, credential_store):
    await registry.set_priority("gemini-oauth-1.json", 4)

    stored = await credential_store.get("gemini-oauth-1.json")
    assert stored.attributes == {"priority": "4"}


async def test_lookup_by_id_uses_file_name_as_mirror_key(registry):
    await registry.set_priority("a1", 9)

    assert registry.mirror.as_dict() == {"acct1.json": 9}


async def test_lookup_by_id_without_file_name(registry, credential_store):
    name = "claude:apikey:sk-ant-0123456789"
    await registry.set_priority(name, 2)

    stored = await credential_store.get(name)
    assert stored.attributes["priority"] == "2"
    assert registry.mirror.as_dict() == {name: 2}
    # Inline credentials stay out of the read report
    assert name not in await registry.list_priorities()


async def test_unknown_name_changes_nothing(registry, credential_store, config_path):
    before = await credential_store.list()

    with pytest.raises(AuthNotFoundError):
        await registry.set_priority("missing.json", 1)

    assert await credential_store.list() == before
    assert registry.config_store.config.auth_priority is None
    assert not config_path.exists()


async def test_blank_name_is_rejected(registry):
    with pytest.raises(RequestValidationError):
        await registry.set_priority("   ", 1)


async def test_positional_update_sets_value(registry, credential_store):
    await registry.set_priority("acct2.json", PriorityUpdate(5))

    stored = await credential_store.get("a2")
    assert stored.attributes["priority"] == "5"
    assert registry.mirror.as_dict() == {"acct2.json": 5}


@pytest.mark.parametrize("priority", [True, 1.9, "3"])
async def test_non_integer_priority_is_rejected(
    registry, credential_store, config_path, priority
):
    with pytest.raises(RequestValidationError):
        await registry.set_priority("acct1.json", priority)

    stored = await credential_store.get("a1")
    assert stored.attributes == {}
    assert registry.config_store.config.auth_priority is None
    assert not config_path.exists()


async def test_unavailable_without_store(config_store):
    registry = AuthPriorityRegistry(None, config_store)

    with pytest.raises(ServiceUnavailableError):
        await registry.set_priority("acct1.json", 1)
    assert await registry.list_priorities() == {}


async def test_unavailable_without_config_store(credential_store):
    registry = AuthPriorityRegistry(credential_store, None)

    with pytest.raises(ServiceUnavailableError):
        await registry.set_priority("acct1.json", 1)
    stored = await credential_store.get("a1")
    assert stored.attributes == {}


async def test_store_failure_aborts_mirror_and_persist(config_store, config_path):
    store = RejectingStore([AuthEntry(id="a1", file_name="acct1.json")])
    registry = AuthPriorityRegistry(store, config_store)

    with pytest.raises(CredentialUpdateError) as exc_info:
        await registry.set_priority("acct1.json", 5)

    assert exc_info.value.entry_id == "a1"
    assert config_store.config.auth_priority is None
    assert not config_path.exists()


async def test_persistence_failure_keeps_memory_changes(
    registry, credential_store, monkeypatch
):
    def fail_write(path, content):
        raise OSError("disk full")

    monkeypatch.setattr(
        "auth_priority.persistence.config_store._atomic_write_text", fail_write
    )

    with pytest.raises(PersistenceError):
        await registry.set_priority("acct1.json", 5)

    stored = await credential_store.get("a1")
    assert stored.attributes["priority"] == "5"
    assert registry.mirror.as_dict() == {"acct1.json": 5}


async def test_concurrent_updates_leave_stores_consistent(registry, credential_store):
    await asyncio.gather(*(registry.set_priority("acct1.json", n) for n in range(10)))

    stored = await credential_store.get("a1")
    assert int(stored.attributes["priority"]) == registry.mirror.get("acct1.json")


async def test_get_priority(registry):
    await registry.set_priority("acct1.json", 6)

    assert await registry.get_priority("acct1.json") == 6
    assert await registry.get_priority("a1") == 6
    assert await registry.get_priority("missing.json") is None


async def test_existing_document_keys_survive_update(credential_store, config_path):
    config_path.write_text(
        "port: 8317\nauth-dir: ~/.auths\nauth-priority:\n  acct2.json: 1\n",
        encoding="utf-8",
    )
    config_store = ConfigStore(str(config_path))
    config_store.load()
    registry = AuthPriorityRegistry(credential_store, config_store)

    await registry.set_priority("acct1.json", 4)

    assert read_document(config_path) == {
        "port": 8317,
        "auth-dir": "~/.auths",
        "auth-priority": {"acct2.json": 1, "acct1.json": 4},
    }
