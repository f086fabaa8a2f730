# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Read access to auth entry priorities.

An entry without a parseable "priority" attribute reads as the default
priority. Explicit zero and unset both read 0; only has_explicit_priority
tells them apart.
"""

import logging
from typing import Dict, Mapping, Optional

from ..core.constants import (
    DEFAULT_AUTH_FILE_SUFFIX,
    DEFAULT_PRIORITY,
    PRIORITY_ATTRIBUTE,
)
from ..store.credential_store import CredentialStore

lib_logger = logging.getLogger("auth_priority")


def parse_priority(attributes: Optional[Mapping[str, str]]) -> int:
    """Parse the priority attribute, falling back to the default."""
    if not attributes:
        return DEFAULT_PRIORITY
    raw = (attributes.get(PRIORITY_ATTRIBUTE) or "").strip()
    if not raw:
        return DEFAULT_PRIORITY
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PRIORITY


def has_explicit_priority(attributes: Optional[Mapping[str, str]]) -> bool:
    """True if the priority attribute is present, whatever its value."""
    return bool(attributes) and PRIORITY_ATTRIBUTE in attributes


class PriorityAccessor:
    """Reports priorities of file-backed auth entries."""

    def __init__(
        self,
        store: CredentialStore,
        file_suffix: str = DEFAULT_AUTH_FILE_SUFFIX,
    ):
        self._store = store
        self._suffix = file_suffix.lower()

    def is_file_backed(self, display_name: str) -> bool:
        """Inline credentials such as "claude:apikey:xxx" are not file-backed."""
        return display_name.lower().endswith(self._suffix)

    async def list_priorities(self) -> Dict[str, int]:
        """
        Priorities of all file-backed entries, keyed by display name.

        Pure read; entries without a display name and inline credentials
        are left out even if they carry a priority attribute.
        """
        result: Dict[str, int] = {}
        for entry in await self._store.list():
            if entry is None:
                continue
            name = entry.display_name
            if not name or not self.is_file_backed(name):
                continue
            result[name] = parse_priority(entry.attributes)

        lib_logger.debug(f"Listed priorities for {len(result)} auth file(s)")
        return result

    async def get_priority(self, entry_id: str) -> Optional[int]:
        """Priority of a single entry by ID, or None if the entry is unknown."""
        entry = await self._store.get(entry_id)
        if entry is None:
            return None
        return parse_priority(entry.attributes)
