# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Configuration document persistence."""

from .config_store import ConfigStore, config_to_document, document_to_config

__all__ = ["ConfigStore", "config_to_document", "document_to_config"]
