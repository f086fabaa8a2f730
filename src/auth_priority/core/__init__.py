# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Core package for the auth priority registry.

Provides shared infrastructure used by the stores, the registry and the
management API:
- types: Shared dataclasses
- errors: All custom exceptions
- config: ConfigLoader for runtime settings
- constants: Default values and magic strings
"""

from .types import (
    AuthEntry,
    ResolvedAuth,
    PriorityUpdate,
    GatewayConfig,
    RegistrySettings,
)

from .errors import (
    AuthPriorityError,
    RequestValidationError,
    ServiceUnavailableError,
    AuthNotFoundError,
    CredentialStoreError,
    CredentialUpdateError,
    PersistenceError,
    mask_name,
)

from .config import ConfigLoader

__all__ = [
    # Types
    "AuthEntry",
    "ResolvedAuth",
    "PriorityUpdate",
    "GatewayConfig",
    "RegistrySettings",
    # Errors
    "AuthPriorityError",
    "RequestValidationError",
    "ServiceUnavailableError",
    "AuthNotFoundError",
    "CredentialStoreError",
    "CredentialUpdateError",
    "PersistenceError",
    "mask_name",
    # Config
    "ConfigLoader",
]
