# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Auth priority registry package.

Public API:
    AuthPriorityRegistry: Facade for reading and updating priorities
    create_registry: Build a registry from config and the auth directory

Components (for advanced usage):
    IdentityResolver: Display name / ID resolution
    PriorityAccessor: Priority reads
    PriorityMutator: Tri-state priority updates
    ConfigPriorityMirror: Incremental config mirror
"""

from .accessor import PriorityAccessor, has_explicit_priority, parse_priority
from .mirror import ConfigPriorityMirror
from .resolver import IdentityResolver
from .mutator import PriorityMutator
from .registry import AuthPriorityRegistry, create_registry

__all__ = [
    "AuthPriorityRegistry",
    "create_registry",
    "IdentityResolver",
    "PriorityAccessor",
    "PriorityMutator",
    "ConfigPriorityMirror",
    "parse_priority",
    "has_explicit_priority",
]
