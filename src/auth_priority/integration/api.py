# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Management API for auth priorities.

=============================================================================
ENDPOINTS
=============================================================================

    GET /v0/management/auth-priority
        200 {"auth-priority": {"acct1.json": 5, "acct2.json": 0}}

        Only file-backed credentials are listed. Without a credential
        store the mapping is empty.

    PATCH /v0/management/auth-priority
        Body: {"name": "acct1.json", "priority": 10}

        "priority": null (or omitted) clears the setting, restoring the
        default. "priority": 0 stores an explicit zero. "name" may be the
        credential file name or the entry ID.

        200 {"status": "ok"}
        400 {"error": "invalid body" | "name is required" | "name cannot be empty"}
        404 {"error": "auth file not found"}
        500 {"error": "failed to update auth: ..." | "failed to save config: ..."}
        503 {"error": "handler not initialized"}

=============================================================================
MOUNTING
=============================================================================

    from auth_priority.integration import create_app

    app = create_app(registry)  # or create_app() to build from config.yaml

    # Or mount the router on an existing app
    app.state.auth_priority_registry = registry
    app.include_router(router)
=============================================================================
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core.constants import (
    AUTH_PRIORITY_RESPONSE_KEY,
    AUTH_PRIORITY_ROUTE,
    MANAGEMENT_PREFIX,
)
from ..core.errors import (
    AuthNotFoundError,
    CredentialUpdateError,
    PersistenceError,
    RequestValidationError,
    ServiceUnavailableError,
)
from ..registry.registry import AuthPriorityRegistry, create_registry
from .models import AuthPriorityPatch

lib_logger = logging.getLogger("auth_priority")

router = APIRouter(prefix=MANAGEMENT_PREFIX, tags=["auth-priority"])


def get_registry(request: Request) -> Optional[AuthPriorityRegistry]:
    """Registry attached to the application, if any."""
    return getattr(request.app.state, "auth_priority_registry", None)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def parse_patch_body(request: Request) -> AuthPriorityPatch:
    """
    Parse and validate a PATCH body.

    Raises:
        RequestValidationError: Malformed JSON, wrong field types, or a
            missing/blank name
    """
    try:
        body = AuthPriorityPatch.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        raise RequestValidationError("invalid body") from e

    if body.name is None:
        raise RequestValidationError("name is required")
    if not body.name.strip():
        raise RequestValidationError("name cannot be empty")
    return body


@router.get(AUTH_PRIORITY_ROUTE)
async def get_auth_priority(
    registry: Optional[AuthPriorityRegistry] = Depends(get_registry),
):
    if registry is None:
        return {AUTH_PRIORITY_RESPONSE_KEY: {}}
    return {AUTH_PRIORITY_RESPONSE_KEY: await registry.list_priorities()}


@router.patch(AUTH_PRIORITY_ROUTE)
async def patch_auth_priority(
    request: Request,
    registry: Optional[AuthPriorityRegistry] = Depends(get_registry),
):
    if registry is None or registry.store is None or registry.config_store is None:
        return _error("handler not initialized", 503)

    try:
        body = await parse_patch_body(request)
    except RequestValidationError as e:
        return _error(str(e), 400)

    try:
        await registry.set_priority(body.name, body.to_update())
    except RequestValidationError as e:
        return _error(str(e), 400)
    except ServiceUnavailableError:
        return _error("handler not initialized", 503)
    except AuthNotFoundError:
        return _error("auth file not found", 404)
    except CredentialUpdateError as e:
        lib_logger.error(f"Auth priority update failed: {e}")
        return _error(str(e), 500)
    except PersistenceError as e:
        return _error(f"failed to save config: {e}", 500)

    return {"status": "ok"}


def create_app(registry: Optional[AuthPriorityRegistry] = None) -> FastAPI:
    """
    Build a FastAPI app serving the management API.

    Args:
        registry: Registry to serve. If None, one is built from the
            configuration document when the app starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "auth_priority_registry", None) is None:
            app.state.auth_priority_registry = await create_registry()
        yield

    app = FastAPI(title="Auth Priority Registry", lifespan=lifespan)
    app.state.auth_priority_registry = registry
    app.include_router(router)
    return app
