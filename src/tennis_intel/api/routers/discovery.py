"""
Discovery router - icon and well-known registration documents.

Endpoints:
- GET /icon.png - Redirect to the hosted icon
- GET /.well-known/erc8004.json - ERC-8004 registration file
- GET /.well-known/agent.json - A2A agent card with entrypoints and prices
"""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from ..dependencies import RegistryDependency, SettingsDependency

router = APIRouter()

ERC8004_TYPE = "https://eips.ethereum.org/EIPS/eip-8004#registration-v1"
A2A_VERSION = "0.3.0"


@router.get("/icon.png", include_in_schema=False)
async def icon(settings: SettingsDependency) -> RedirectResponse:
    """Redirect to the hosted icon."""
    return RedirectResponse(settings.icon_url, status_code=302)


@router.get("/.well-known/erc8004.json")
async def erc8004_registration(
    settings: SettingsDependency,
    registry: RegistryDependency,
) -> dict:
    """ERC-8004 registration file describing this agent."""
    base_url = settings.base_url
    paid = [ep for ep in registry.entrypoints() if ep.listed and not ep.is_free]
    free = [ep for ep in registry.entrypoints() if ep.is_advertised_free]

    return {
        "type": ERC8004_TYPE,
        "name": settings.app_name,
        "description": (
            f"{settings.app_description} "
            f"{len(free)} FREE + {len(paid)} PAID endpoints via x402."
        ),
        "image": f"{base_url}/icon.png",
        "services": [
            {"name": "web", "endpoint": base_url},
            {"name": "A2A", "endpoint": f"{base_url}/.well-known/agent.json", "version": A2A_VERSION},
        ],
        "x402Support": True,
        "active": True,
        "registrations": [],
        "supportedTrust": ["reputation"],
    }


@router.get("/.well-known/agent.json")
async def agent_card(
    settings: SettingsDependency,
    registry: RegistryDependency,
) -> dict:
    """A2A agent card listing every entrypoint."""
    base_url = settings.base_url
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": settings.app_description,
        "url": base_url,
        "protocolVersion": A2A_VERSION,
        "capabilities": {"streaming": False},
        "entrypoints": [
            {**ep.to_dict(), "url": f"{base_url}/entrypoints/{ep.key}/invoke"}
            for ep in registry.entrypoints()
        ],
    }
