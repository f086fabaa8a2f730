# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Credential store interface and the in-memory implementation.

The store is the authoritative list of auth entries. The registry only
enumerates, looks up and updates entries through this interface; it never
creates or deletes them.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..core.types import AuthEntry
from ..core.errors import CredentialStoreError, mask_name

lib_logger = logging.getLogger("auth_priority")


class CredentialStore(ABC):
    """
    Abstract credential store.

    Implementations own their synchronization: update() must be safe
    under concurrent calls for the same entry.
    """

    @abstractmethod
    async def list(self) -> List[Optional[AuthEntry]]:
        """Enumerate all entries, in store order."""
        ...

    @abstractmethod
    async def get(self, entry_id: str) -> Optional[AuthEntry]:
        """Look up a live entry by ID, or None if unknown."""
        ...

    @abstractmethod
    async def update(self, entry: AuthEntry) -> AuthEntry:
        """
        Write an entry back in place.

        Raises:
            CredentialStoreError: If the entry cannot be updated
        """
        ...


class InMemoryCredentialStore(CredentialStore):
    """
    Credential store backed by an insertion-ordered dict.

    list() and get() hand out copies, so callers only change the stored
    entry by passing it back through update().
    """

    def __init__(self, entries: Optional[Iterable[AuthEntry]] = None):
        self._entries: Dict[str, AuthEntry] = {}
        self._lock = asyncio.Lock()
        for entry in entries or ():
            self._add(entry)

    async def register(self, entry: AuthEntry) -> None:
        """
        Add an entry to the store.

        Used by loaders at startup; an existing entry with the same ID is
        replaced.
        """
        async with self._lock:
            self._add(entry)

    async def list(self) -> List[Optional[AuthEntry]]:
        async with self._lock:
            return [entry.clone() for entry in self._entries.values()]

    async def get(self, entry_id: str) -> Optional[AuthEntry]:
        async with self._lock:
            entry = self._entries.get(entry_id)
            return entry.clone() if entry is not None else None

    async def update(self, entry: AuthEntry) -> AuthEntry:
        async with self._lock:
            if entry.id not in self._entries:
                raise CredentialStoreError(f"unknown auth entry: {entry.id}")
            stored = entry.clone()
            self._entries[entry.id] = stored
            lib_logger.debug(f"Updated auth entry {mask_name(entry.display_name)}")
            return stored.clone()

    def __len__(self) -> int:
        return len(self._entries)

    def _add(self, entry: AuthEntry) -> None:
        if not entry.id or not entry.id.strip():
            raise CredentialStoreError("auth entry ID must not be empty")
        self._entries[entry.id] = entry.clone()
