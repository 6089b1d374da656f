"""
Entrypoints router - lists and invokes priced capabilities.

Endpoints:
- GET /entrypoints/ - All capabilities with price and input schema
- GET /entrypoints/{key} - One capability
- POST /entrypoints/{key}/invoke - Run a capability with {"input": {...}}
"""

import logging
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, Path
from pydantic import BaseModel

from ..dependencies import ContextDependency, RegistryDependency

logger = logging.getLogger(__name__)

router = APIRouter()


class InvokeRequest(BaseModel):
    """Invocation body; the body and its input (absent or null) are optional."""

    input: Optional[dict[str, Any]] = None


@router.get("/")
async def list_entrypoints(registry: RegistryDependency) -> dict:
    """List every capability with its price and input schema."""
    items = [ep.to_dict() for ep in registry.entrypoints()]
    return {"entrypoints": items, "count": len(items)}


@router.get("/{key}")
async def get_entrypoint(
    key: Annotated[str, Path(description="Capability key, e.g. atp-rankings")],
    registry: RegistryDependency,
) -> dict:
    """Describe a single capability."""
    return registry.get(key).to_dict()


@router.post("/{key}/invoke")
async def invoke_entrypoint(
    key: Annotated[str, Path(description="Capability key, e.g. atp-rankings")],
    registry: RegistryDependency,
    ctx: ContextDependency,
    body: Annotated[InvokeRequest | None, Body()] = None,
) -> dict:
    """
    Invoke a capability.

    Input is validated against the capability schema before ESPN is
    contacted. Upstream failures surface as 502 responses; there are
    no partial results.

    Example:
        POST /entrypoints/news/invoke
        {"input": {"tour": "atp", "limit": 5}}
    """
    payload = (body.input if body else None) or {}
    output = await registry.invoke(key, payload, ctx)
    return {"key": key, "status": "succeeded", "output": output}
