# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Pydantic request models for the management API."""

from typing import Optional

from pydantic import BaseModel, StrictInt, StrictStr

from ..core.types import PriorityUpdate


class AuthPriorityPatch(BaseModel):
    """
    Body of PATCH /auth-priority.

    A missing or null priority clears the setting; 0 is stored explicitly.
    """

    name: Optional[StrictStr] = None
    priority: Optional[StrictInt] = None

    def to_update(self) -> PriorityUpdate:
        return PriorityUpdate.from_optional(self.priority)
