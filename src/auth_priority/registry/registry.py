# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Auth Priority Registry facade.

Bundles identity resolution, priority reads and priority mutation around
an injected credential store and configuration store. Either collaborator
may be missing: reads then report nothing and writes fail with
ServiceUnavailableError.
"""

import asyncio
import logging
from typing import Dict, Optional, Union

from ..core.config import ConfigLoader
from ..core.constants import DEFAULT_AUTH_FILE_SUFFIX
from ..core.errors import AuthNotFoundError, RequestValidationError
from ..core.types import AuthEntry, PriorityUpdate, ResolvedAuth
from ..persistence.config_store import ConfigStore
from ..store.credential_store import CredentialStore, InMemoryCredentialStore
from ..store.loader import load_auth_directory
from .accessor import PriorityAccessor
from .mirror import ConfigPriorityMirror
from .mutator import PriorityMutator
from .resolver import IdentityResolver

lib_logger = logging.getLogger("auth_priority")


class AuthPriorityRegistry:
    """
    Public entry point for reading and updating auth priorities.

    Example:
        registry = AuthPriorityRegistry(store, config_store)
        await registry.set_priority("acct1.json", 5)
        await registry.list_priorities()  # {"acct1.json": 5}
        await registry.set_priority("acct1.json", None)  # clear
    """

    def __init__(
        self,
        store: Optional[CredentialStore] = None,
        config_store: Optional[ConfigStore] = None,
        file_suffix: str = DEFAULT_AUTH_FILE_SUFFIX,
    ):
        self.store = store
        self.config_store = config_store
        self._accessor = (
            PriorityAccessor(store, file_suffix) if store is not None else None
        )
        self._mutator = PriorityMutator(store, config_store)

    async def list_priorities(self) -> Dict[str, int]:
        """Priorities of file-backed entries; empty without a store."""
        if self._accessor is None:
            return {}
        return await self._accessor.list_priorities()

    async def resolve(self, name: str) -> Optional[ResolvedAuth]:
        """Resolve a display name or ID, or None if nothing matches."""
        if self.store is None:
            return None
        try:
            return await IdentityResolver(self.store).resolve(name)
        except AuthNotFoundError:
            return None

    async def get_priority(self, name: str) -> Optional[int]:
        """Priority of the entry named by display name or ID."""
        resolved = await self.resolve(name)
        if resolved is None or self._accessor is None:
            return None
        return await self._accessor.get_priority(resolved.entry_id)

    async def set_priority(
        self,
        name: str,
        priority: Union[PriorityUpdate, int, None],
    ) -> AuthEntry:
        """
        Set (int) or clear (None) the priority of an entry.

        Raises:
            RequestValidationError: If name is blank or priority is not an
                integer
            ServiceUnavailableError, AuthNotFoundError,
            CredentialUpdateError, PersistenceError: See PriorityMutator
        """
        name = (name or "").strip()
        if not name:
            raise RequestValidationError("name cannot be empty")

        if not isinstance(priority, PriorityUpdate):
            try:
                priority = PriorityUpdate.from_optional(priority)
            except TypeError as e:
                raise RequestValidationError(str(e)) from e
        return await self._mutator.set_priority(name, priority)

    @property
    def mirror(self) -> Optional[ConfigPriorityMirror]:
        """The config priority mirror, or None without a config store."""
        if self.config_store is None:
            return None
        return ConfigPriorityMirror(self.config_store.config)


async def create_registry(config_path: Optional[str] = None) -> AuthPriorityRegistry:
    """
    Build a registry from the configuration document and the auth directory.

    Args:
        config_path: YAML config path; AUTH_PRIORITY_CONFIG overrides it

    Returns:
        Registry over an InMemoryCredentialStore populated from auth-dir
    """
    loader = ConfigLoader(config_path)
    config_store = ConfigStore(loader.resolve_config_path())
    config = await asyncio.to_thread(config_store.load)
    settings = loader.load_settings(config)

    store = InMemoryCredentialStore()
    if settings.auth_dir:
        await load_auth_directory(store, settings.auth_dir, settings.auth_file_suffix)
    else:
        lib_logger.warning("No auth-dir configured, credential store is empty")

    return AuthPriorityRegistry(store, config_store, settings.auth_file_suffix)
