# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Auth priority registry for a multi-credential authentication gateway.

Tracks an optional integer priority per auth entry, keeps the credential
store and the persisted configuration mirror in sync, and serves both
through a management API.
"""

from .core import (
    AuthEntry,
    PriorityUpdate,
    GatewayConfig,
    AuthPriorityError,
    RequestValidationError,
    ServiceUnavailableError,
    AuthNotFoundError,
    CredentialUpdateError,
    PersistenceError,
)
from .store import CredentialStore, InMemoryCredentialStore, load_auth_directory
from .persistence import ConfigStore
from .registry import AuthPriorityRegistry, create_registry

__all__ = [
    "AuthPriorityRegistry",
    "create_registry",
    "AuthEntry",
    "PriorityUpdate",
    "GatewayConfig",
    "CredentialStore",
    "InMemoryCredentialStore",
    "load_auth_directory",
    "ConfigStore",
    "AuthPriorityError",
    "RequestValidationError",
    "ServiceUnavailableError",
    "AuthNotFoundError",
    "CredentialUpdateError",
    "PersistenceError",
]
