# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Config priority mirror.

A display name -> priority mapping kept on the configuration document for
consumers that read config directly. It is only ever changed incrementally
by the priority mutator and is never rebuilt from the credential store, so
entries added, renamed or removed elsewhere can make it drift.
"""

from typing import Dict, Optional

from ..core.types import GatewayConfig


class ConfigPriorityMirror:
    """Incremental view over GatewayConfig.auth_priority."""

    def __init__(self, config: GatewayConfig):
        self._config = config

    def get(self, name: str) -> Optional[int]:
        if not self._config.auth_priority:
            return None
        return self._config.auth_priority.get(name)

    def set(self, name: str, priority: int) -> None:
        if self._config.auth_priority is None:
            self._config.auth_priority = {}
        self._config.auth_priority[name] = priority

    def remove(self, name: str) -> None:
        """Drop a name; an emptied mirror becomes absent (None), not {}."""
        if self._config.auth_priority is None:
            return
        self._config.auth_priority.pop(name, None)
        if not self._config.auth_priority:
            self._config.auth_priority = None

    def as_dict(self) -> Dict[str, int]:
        return dict(self._config.auth_priority or {})

    def __contains__(self, name: object) -> bool:
        return bool(self._config.auth_priority) and name in self._config.auth_priority
