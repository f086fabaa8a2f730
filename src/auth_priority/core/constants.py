# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Constants and default values for the auth priority registry.

All tunable defaults live here so the config loader, the stores and the
management API share one import point.
"""

# =============================================================================
# PRIORITY
# =============================================================================

# Attribute key holding the priority on an auth entry
PRIORITY_ATTRIBUTE = "priority"

# Priority reported for entries without a parseable priority attribute
DEFAULT_PRIORITY = 0

# Display names ending with this suffix (case-insensitive) are file-backed
DEFAULT_AUTH_FILE_SUFFIX = ".json"

# =============================================================================
# CONFIGURATION DOCUMENT
# =============================================================================

DEFAULT_CONFIG_PATH = "config.yaml"

# Top-level keys of the YAML configuration document
CONFIG_KEY_AUTH_DIR = "auth-dir"
CONFIG_KEY_AUTH_PRIORITY = "auth-priority"

# Environment variables (ALWAYS override the document)
ENV_CONFIG_PATH = "AUTH_PRIORITY_CONFIG"
ENV_AUTH_DIR = "AUTH_PRIORITY_AUTH_DIR"
ENV_AUTH_FILE_SUFFIX = "AUTH_PRIORITY_FILE_SUFFIX"

# =============================================================================
# MANAGEMENT API
# =============================================================================

MANAGEMENT_PREFIX = "/v0/management"
AUTH_PRIORITY_ROUTE = "/auth-priority"
AUTH_PRIORITY_RESPONSE_KEY = "auth-priority"


__all__ = [
    "PRIORITY_ATTRIBUTE",
    "DEFAULT_PRIORITY",
    "DEFAULT_AUTH_FILE_SUFFIX",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_KEY_AUTH_DIR",
    "CONFIG_KEY_AUTH_PRIORITY",
    "ENV_CONFIG_PATH",
    "ENV_AUTH_DIR",
    "ENV_AUTH_FILE_SUFFIX",
    "MANAGEMENT_PREFIX",
    "AUTH_PRIORITY_ROUTE",
    "AUTH_PRIORITY_RESPONSE_KEY",
]
