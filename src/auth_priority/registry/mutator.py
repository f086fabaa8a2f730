# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Priority mutation.

Applies a PriorityUpdate to an auth entry and to the config priority
mirror, then persists the configuration document.
"""

import asyncio
import logging
import time
from typing import Dict, Optional

from ..core.constants import PRIORITY_ATTRIBUTE
from ..core.types import AuthEntry, PriorityUpdate
from ..core.errors import (
    AuthNotFoundError,
    CredentialStoreError,
    CredentialUpdateError,
    ServiceUnavailableError,
    mask_name,
)
from ..persistence.config_store import ConfigStore
from ..store.credential_store import CredentialStore
from .mirror import ConfigPriorityMirror
from .resolver import IdentityResolver

lib_logger = logging.getLogger("auth_priority")


class PriorityMutator:
    """
    Sets or clears the priority of an auth entry.

    Steps for one update:
    1. Resolve the name to an entry ID and display name
    2. Fetch the live entry by ID (not the enumeration snapshot)
    3. Set or remove the priority attribute, stamp updated_at
    4. Write the entry back through the credential store
    5. Mirror the change under the resolved display name
    6. Persist the configuration document

    Steps 2-6 hold a per-entry lock, so concurrent updates to the same
    entry leave the store and the mirror agreeing on the last writer.
    Updates that bypass this mutator are not covered.
    """

    def __init__(
        self,
        store: Optional[CredentialStore],
        config_store: Optional[ConfigStore],
    ):
        self._store = store
        self._config_store = config_store
        self._entry_locks: Dict[str, asyncio.Lock] = {}

    async def set_priority(self, name: str, update: PriorityUpdate) -> AuthEntry:
        """
        Apply a priority update to the entry named by name.

        Args:
            name: Display name or ID, already validated as non-empty
            update: Clear or set-to-value

        Returns:
            The entry as written to the credential store

        Raises:
            ServiceUnavailableError: No credential store or config target
            AuthNotFoundError: Name does not resolve; nothing was changed
            CredentialUpdateError: The store rejected the update; the
                mirror and the config document were left untouched
            PersistenceError: Saving the config failed after the store and
                the mirror were updated
        """
        if self._store is None or self._config_store is None:
            raise ServiceUnavailableError("handler not initialized")

        resolved = await IdentityResolver(self._store).resolve(name)

        async with self._lock_for(resolved.entry_id):
            entry = await self._store.get(resolved.entry_id)
            if entry is None:
                raise AuthNotFoundError(name.strip())

            if entry.attributes is None:
                entry.attributes = {}
            if update.is_clear:
                entry.attributes.pop(PRIORITY_ATTRIBUTE, None)
            else:
                entry.attributes[PRIORITY_ATTRIBUTE] = str(update.value)
            entry.updated_at = time.time()

            try:
                entry = await self._store.update(entry)
            except CredentialStoreError as e:
                raise CredentialUpdateError(
                    resolved.entry_id, f"failed to update auth: {e}"
                ) from e

            mirror = ConfigPriorityMirror(self._config_store.config)
            if update.is_clear:
                mirror.remove(resolved.display_name)
            else:
                mirror.set(resolved.display_name, update.value)

            await self._config_store.persist()

        lib_logger.info(
            f"Auth priority for {mask_name(resolved.display_name)} set to {update}"
        )
        return entry

    def _lock_for(self, entry_id: str) -> asyncio.Lock:
        lock = self._entry_locks.get(entry_id)
        if lock is None:
            lock = asyncio.Lock()
            self._entry_locks[entry_id] = lock
        return lock
