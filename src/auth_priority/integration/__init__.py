# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Management API integration."""

from .api import create_app, get_registry, router
from .models import AuthPriorityPatch

__all__ = ["create_app", "get_registry", "router", "AuthPriorityPatch"]
