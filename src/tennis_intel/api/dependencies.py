"""
Dependency injection for API endpoints.

The agent context and entrypoint registry are created by ``create_app``
and stored on ``app.state``; routes receive them through these
dependencies rather than through module-level singletons.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..core.config import Settings
from ..services.context import AgentContext
from .registry import EntrypointRegistry


def get_context(request: Request) -> AgentContext:
    """Dependency that provides the app's AgentContext."""
    return request.app.state.context


def get_registry(request: Request) -> EntrypointRegistry:
    """Dependency that provides the app's entrypoint registry."""
    return request.app.state.registry


def get_app_settings(request: Request) -> Settings:
    """Dependency that provides the settings the app was built with."""
    return request.app.state.context.settings


ContextDependency = Annotated[AgentContext, Depends(get_context)]
RegistryDependency = Annotated[EntrypointRegistry, Depends(get_registry)]
SettingsDependency = Annotated[Settings, Depends(get_app_settings)]
