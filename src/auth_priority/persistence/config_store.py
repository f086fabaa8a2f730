# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
YAML persistence for the gateway configuration document.

The store owns the loaded GatewayConfig (the config target mutated by the
registry) and writes it back atomically. Keys it does not manage are
carried through untouched.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.constants import CONFIG_KEY_AUTH_DIR, CONFIG_KEY_AUTH_PRIORITY
from ..core.errors import PersistenceError
from ..core.types import GatewayConfig

lib_logger = logging.getLogger("auth_priority")


class ConfigStore:
    """
    Loads and saves the gateway configuration document.

    Usage:
        store = ConfigStore("config.yaml")
        store.load()
        store.config.auth_priority = {"acct1.json": 5}
        await store.persist()
    """

    def __init__(self, path: str, config: Optional[GatewayConfig] = None):
        """
        Initialize the store.

        Args:
            path: Path of the YAML document
            config: Already-loaded document. If None, an empty document is
                used until load() is called.
        """
        self.path = Path(path)
        self.config = config if config is not None else GatewayConfig()
        self._lock = asyncio.Lock()

    def load(self) -> GatewayConfig:
        """
        Read the document from disk, replacing the in-memory config.

        A missing file yields an empty document.

        Raises:
            PersistenceError: If the file cannot be read or parsed
        """
        if not self.path.exists():
            lib_logger.info(f"Config file {self.path} not found, starting empty")
            self.config = GatewayConfig()
            return self.config

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise PersistenceError(
                f"failed to load config: {e}", path=str(self.path)
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PersistenceError(
                "failed to load config: top level must be a mapping",
                path=str(self.path),
            )

        self.config = document_to_config(data)
        return self.config

    async def persist(self) -> None:
        """Save the in-memory config. See save()."""
        await self.save(self.config)

    async def save(self, config: GatewayConfig) -> None:
        """
        Write a config document atomically.

        Concurrent saves are serialized; the blocking write runs in a
        worker thread.

        Raises:
            PersistenceError: If the document cannot be written
        """
        content = yaml.safe_dump(
            config_to_document(config),
            sort_keys=False,
            allow_unicode=True,
        )
        async with self._lock:
            try:
                await asyncio.to_thread(_atomic_write_text, self.path, content)
            except OSError as e:
                lib_logger.error(f"Failed to save config to {self.path}: {e}")
                raise PersistenceError(str(e), path=str(self.path)) from e
        lib_logger.debug(f"Saved config to {self.path}")


# =============================================================================
# SERIALIZATION
# =============================================================================


def document_to_config(data: Dict[str, Any]) -> GatewayConfig:
    """Build a GatewayConfig from a parsed YAML mapping."""
    extra = {
        k: v
        for k, v in data.items()
        if k not in (CONFIG_KEY_AUTH_DIR, CONFIG_KEY_AUTH_PRIORITY)
    }

    auth_dir = data.get(CONFIG_KEY_AUTH_DIR)
    if auth_dir is not None and not isinstance(auth_dir, str):
        lib_logger.warning(f"Ignoring non-string '{CONFIG_KEY_AUTH_DIR}': {auth_dir!r}")
        auth_dir = None

    priorities: Dict[str, int] = {}
    raw = data.get(CONFIG_KEY_AUTH_PRIORITY)
    if isinstance(raw, dict):
        for name, value in raw.items():
            if isinstance(value, bool) or not isinstance(value, int):
                lib_logger.warning(
                    f"Ignoring invalid '{CONFIG_KEY_AUTH_PRIORITY}' value for {name}: {value!r}"
                )
                continue
            priorities[str(name)] = value
    elif raw is not None:
        lib_logger.warning(f"Ignoring non-mapping '{CONFIG_KEY_AUTH_PRIORITY}'")

    return GatewayConfig(
        auth_dir=auth_dir,
        auth_priority=priorities or None,
        extra=extra,
    )


def config_to_document(config: GatewayConfig) -> Dict[str, Any]:
    """
    Build the YAML mapping for a GatewayConfig.

    The auth-priority key is omitted when the mirror is absent or empty.
    """
    document: Dict[str, Any] = dict(config.extra)
    if config.auth_dir is not None:
        document[CONFIG_KEY_AUTH_DIR] = config.auth_dir
    if config.auth_priority:
        document[CONFIG_KEY_AUTH_PRIORITY] = dict(config.auth_priority)
    return document


def _atomic_write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp-{os.getpid()}")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
