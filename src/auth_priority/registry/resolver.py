# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Identity resolution for auth entries.

A caller may name an entry either by its display name (the credential
file name) or by its opaque ID, even when the two differ.
"""

import logging

from ..core.types import ResolvedAuth
from ..core.errors import AuthNotFoundError, mask_name
from ..store.credential_store import CredentialStore

lib_logger = logging.getLogger("auth_priority")


class IdentityResolver:
    """Maps a user-supplied name to an auth entry ID and display name."""

    def __init__(self, store: CredentialStore):
        self._store = store

    async def resolve(self, name: str) -> ResolvedAuth:
        """
        Find the entry whose display name or ID equals name.

        The first match in store enumeration order wins; the store keeps
        display names unique, so at most one entry is expected to match.

        Args:
            name: Display name or ID (surrounding whitespace ignored)

        Returns:
            ResolvedAuth with the entry ID and its display name. The display
            name may differ from name when the caller searched by ID.

        Raises:
            AuthNotFoundError: If no entry matches
        """
        name = name.strip()
        for entry in await self._store.list():
            if entry is None or not entry.id:
                continue
            display_name = entry.display_name
            if display_name == name or entry.id.strip() == name:
                return ResolvedAuth(entry_id=entry.id, display_name=display_name)

        lib_logger.debug(f"No auth entry matches {mask_name(name)}")
        raise AuthNotFoundError(name)
