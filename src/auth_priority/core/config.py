# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Centralized configuration loader for the auth priority registry.

Settings are resolved in this order (later overrides earlier):
1. System defaults (from constants.py)
2. The YAML configuration document
3. Environment variables (ALWAYS override the document)
"""

import os
import logging
from typing import Optional

from .types import GatewayConfig, RegistrySettings
from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_AUTH_FILE_SUFFIX,
    ENV_CONFIG_PATH,
    ENV_AUTH_DIR,
    ENV_AUTH_FILE_SUFFIX,
)

lib_logger = logging.getLogger("auth_priority")


class ConfigLoader:
    """
    Resolves RegistrySettings from defaults, the config document and env.

    Usage:
        loader = ConfigLoader()
        settings = loader.load_settings(config_store.config)
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the ConfigLoader.

        Args:
            config_path: Explicit config document path. The
                AUTH_PRIORITY_CONFIG env var still wins over it.
        """
        self._config_path = config_path
        self._cached: Optional[RegistrySettings] = None

    def resolve_config_path(self) -> str:
        """Path of the YAML configuration document."""
        env_val = os.getenv(ENV_CONFIG_PATH)
        if env_val:
            return env_val
        return self._config_path or DEFAULT_CONFIG_PATH

    def load_settings(
        self,
        config: Optional[GatewayConfig] = None,
        force_reload: bool = False,
    ) -> RegistrySettings:
        """
        Build settings for the registry.

        Args:
            config: Loaded configuration document, if any
            force_reload: If True, bypass the cached settings

        Returns:
            RegistrySettings with env overrides applied
        """
        if self._cached is not None and not force_reload:
            return self._cached

        settings = RegistrySettings(config_path=self.resolve_config_path())

        if config is not None and config.auth_dir:
            settings.auth_dir = config.auth_dir

        settings = self._apply_env_overrides(settings)

        self._cached = settings
        return settings

    def clear_cache(self) -> None:
        """Drop cached settings so the next load re-reads the environment."""
        self._cached = None

    # =========================================================================
    # INTERNAL METHODS
    # =========================================================================

    def _apply_env_overrides(self, settings: RegistrySettings) -> RegistrySettings:
        # Auth directory: AUTH_PRIORITY_AUTH_DIR
        env_val = os.getenv(ENV_AUTH_DIR)
        if env_val:
            settings.auth_dir = env_val

        # Credential-file suffix: AUTH_PRIORITY_FILE_SUFFIX
        env_val = os.getenv(ENV_AUTH_FILE_SUFFIX)
        if env_val is not None:
            suffix = env_val.strip()
            if suffix.startswith(".") and len(suffix) > 1:
                settings.auth_file_suffix = suffix
            else:
                lib_logger.warning(
                    f"Invalid {ENV_AUTH_FILE_SUFFIX}='{env_val}'. "
                    f"Using '{DEFAULT_AUTH_FILE_SUFFIX}'."
                )
                settings.auth_file_suffix = DEFAULT_AUTH_FILE_SUFFIX

        return settings
