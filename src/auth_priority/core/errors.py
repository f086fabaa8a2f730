# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Error types for the auth priority registry.

Every failure is terminal for the current request; nothing here is
retried. The management API maps each class to an HTTP status.
"""

import re
from typing import Optional


class AuthPriorityError(Exception):
    """Base class for all registry errors."""


class RequestValidationError(AuthPriorityError):
    """
    A management request is malformed or misses required fields.

    Raised before any store is touched.
    """


class ServiceUnavailableError(AuthPriorityError):
    """A required collaborator (credential store or config target) is missing."""


class AuthNotFoundError(AuthPriorityError):
    """No auth entry matches the supplied name."""

    def __init__(self, name: str):
        super().__init__(f"auth file not found: {name}")
        self.name = name


class CredentialStoreError(AuthPriorityError):
    """Raised by credential stores when an operation cannot be applied."""


class CredentialUpdateError(AuthPriorityError):
    """
    Writing an updated auth entry back to the credential store failed.

    Attributes:
        entry_id: ID of the entry that could not be updated
    """

    def __init__(self, entry_id: str, message: str):
        super().__init__(message)
        self.entry_id = entry_id


class PersistenceError(AuthPriorityError):
    """
    Loading or saving the configuration document failed.

    When raised by a save, in-memory state has already been mutated.

    Attributes:
        path: Path of the configuration document, if known
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


# =============================================================================
# UTILITIES
# =============================================================================

_FILE_NAME_RE = re.compile(r"^[\w.\-@+ /\\]+\.\w+$")


def mask_name(name: str) -> str:
    """
    Mask a credential name for logging.

    File names are returned as-is. Anything else may be an inline key
    (e.g. "claude:apikey:sk-...") and only keeps its first and last
    four characters.
    """
    if not name:
        return name
    if _FILE_NAME_RE.match(name):
        return name
    if len(name) <= 12:
        return "****"
    return f"{name[:4]}...{name[-4:]}"


__all__ = [
    "AuthPriorityError",
    "RequestValidationError",
    "ServiceUnavailableError",
    "AuthNotFoundError",
    "CredentialStoreError",
    "CredentialUpdateError",
    "PersistenceError",
    "mask_name",
]
