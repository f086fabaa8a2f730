# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Shared type definitions for the auth priority registry.

Dataclasses used by the stores, the registry components and the
management API.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import DEFAULT_AUTH_FILE_SUFFIX


# =============================================================================
# AUTH ENTRIES
# =============================================================================


@dataclass
class AuthEntry:
    """
    One authentication credential known to the gateway.

    File-backed credentials carry the credential file name; inline
    credentials (e.g. "claude:apikey:xxx") only have their opaque ID.
    """

    id: str  # Opaque stable identifier, never reused
    file_name: str = ""  # Credential file name, empty for inline credentials
    provider: str = ""  # Provider label (informational)
    attributes: Optional[Dict[str, str]] = None  # Auxiliary metadata
    updated_at: Optional[float] = None  # Last modification (epoch seconds)

    @property
    def display_name(self) -> str:
        """File name if present, otherwise the ID."""
        name = (self.file_name or "").strip()
        if name:
            return name
        return (self.id or "").strip()

    def clone(self) -> "AuthEntry":
        """Return a copy that shares no mutable state with this entry."""
        return copy.deepcopy(self)


@dataclass
class ResolvedAuth:
    """Result of resolving a user-supplied name to an auth entry."""

    entry_id: str
    display_name: str  # Key used in the config priority mirror


# =============================================================================
# PRIORITY UPDATES
# =============================================================================


@dataclass(frozen=True)
class PriorityUpdate:
    """
    A requested priority change.

    Either clears the priority (value None, the entry falls back to the
    default) or sets it to an explicit integer, zero included.
    """

    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.value is not None and (
            isinstance(self.value, bool) or not isinstance(self.value, int)
        ):
            raise TypeError(
                f"priority must be an integer or None, got {self.value!r}"
            )

    @property
    def is_clear(self) -> bool:
        return self.value is None

    @classmethod
    def clear(cls) -> "PriorityUpdate":
        return cls(value=None)

    @classmethod
    def set(cls, value: int) -> "PriorityUpdate":
        if value is None:
            raise TypeError("priority must be an integer, use clear() to unset")
        return cls(value=value)

    @classmethod
    def from_optional(cls, value: Optional[int]) -> "PriorityUpdate":
        """Map a nullable request field: None clears, anything else sets."""
        return cls(value=value)

    def __str__(self) -> str:
        return "clear" if self.is_clear else str(self.value)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass
class GatewayConfig:
    """
    The persisted gateway configuration document.

    auth_priority is the config priority mirror: None means the key is
    absent from the document, it is never left as an empty dict.
    """

    auth_dir: Optional[str] = None
    auth_priority: Optional[Dict[str, int]] = None
    extra: Dict[str, Any] = field(default_factory=dict)  # Unmanaged keys


@dataclass
class RegistrySettings:
    """Runtime settings resolved by the ConfigLoader."""

    config_path: str
    auth_dir: Optional[str] = None
    auth_file_suffix: str = DEFAULT_AUTH_FILE_SUFFIX
