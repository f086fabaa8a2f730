# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Populate a credential store from an auth directory.

Each credential file in the directory becomes one auth entry. File
contents are not validated: a file only has to parse as a JSON object.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..core.constants import DEFAULT_AUTH_FILE_SUFFIX, PRIORITY_ATTRIBUTE
from ..core.types import AuthEntry
from .credential_store import InMemoryCredentialStore

lib_logger = logging.getLogger("auth_priority")


def entry_from_file(path: Path, auth_dir: Path) -> Optional[AuthEntry]:
    """
    Build an auth entry from a credential file.

    The entry ID is the file's path relative to the auth directory, the
    file name is its base name. A "priority" field in the file seeds the
    priority attribute.

    Returns:
        AuthEntry, or None if the file could not be read
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        lib_logger.warning(f"Skipping unreadable credential file {path.name}: {e}")
        return None

    if not isinstance(data, dict):
        lib_logger.warning(f"Skipping credential file {path.name}: not a JSON object")
        return None

    attributes: Dict[str, str] = {"path": str(path)}
    raw_priority = data.get(PRIORITY_ATTRIBUTE)
    if isinstance(raw_priority, (int, str)) and not isinstance(raw_priority, bool):
        attributes[PRIORITY_ATTRIBUTE] = str(raw_priority).strip()

    provider = data.get("type")
    return AuthEntry(
        id=path.relative_to(auth_dir).as_posix(),
        file_name=path.name,
        provider=provider if isinstance(provider, str) else "",
        attributes=attributes,
    )


async def load_auth_directory(
    store: InMemoryCredentialStore,
    auth_dir: str,
    suffix: str = DEFAULT_AUTH_FILE_SUFFIX,
) -> List[AuthEntry]:
    """
    Register every credential file of an auth directory in a store.

    Args:
        store: Store to populate
        auth_dir: Directory holding credential files
        suffix: Credential-file suffix, matched case-insensitively

    Returns:
        The entries that were registered, in file name order
    """
    root = Path(auth_dir).expanduser()
    if not root.is_dir():
        lib_logger.warning(f"Auth directory not found: {root}")
        return []

    suffix = suffix.lower()
    loaded: List[AuthEntry] = []
    provider_counts: Dict[str, int] = {}
    # A display name must belong to exactly one entry
    owners: Dict[str, str] = {
        e.display_name: e.id for e in await store.list() if e is not None
    }
    for path in sorted(root.rglob("*")):
        if not path.is_file() or not path.name.lower().endswith(suffix):
            continue
        entry = entry_from_file(path, root)
        if entry is None:
            continue
        owner = owners.get(entry.display_name)
        if owner is not None and owner != entry.id:
            lib_logger.warning(
                f"Skipping {entry.id}: display name {entry.display_name} "
                f"already used by {owner}"
            )
            continue
        owners[entry.display_name] = entry.id
        await store.register(entry)
        loaded.append(entry)
        provider = entry.provider or "unknown"
        provider_counts[provider] = provider_counts.get(provider, 0) + 1

    lib_logger.info(
        f"Loaded {len(loaded)} credential file(s) from {root}: "
        + (
            ", ".join(f"{p}={n}" for p, n in sorted(provider_counts.items()))
            or "none"
        )
    )
    return loaded
