# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Credential store contract, in-memory store and auth directory loader."""

from .credential_store import CredentialStore, InMemoryCredentialStore
from .loader import entry_from_file, load_auth_directory

__all__ = [
    "CredentialStore",
    "InMemoryCredentialStore",
    "entry_from_file",
    "load_auth_directory",
]
