"""
Entrypoint registry - named, priced capabilities with declared input schemas.

An entrypoint couples a pydantic input model, a price in the smallest
currency unit and an async handler taking ``(params, context)``.
Input is validated before the handler runs, so a rejected request never
reaches ESPN.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..services.context import AgentContext
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

Handler = Callable[[Any, AgentContext], Awaitable[Any]]


@dataclass(frozen=True)
class Entrypoint:
    """A single priced capability."""

    key: str
    description: str
    input_model: type[BaseModel]
    price: int
    handler: Handler
    listed: bool = True

    @property
    def is_free(self) -> bool:
        return self.price == 0

    @property
    def is_advertised_free(self) -> bool:
        """Free and counted in the public FREE/PAID tally."""
        return self.is_free and self.listed

    def to_dict(self) -> dict[str, Any]:
        """Public description used by listings and the agent card."""
        return {
            "key": self.key,
            "description": self.description,
            "price": {"amount": self.price},
            "input_schema": self.input_model.model_json_schema(by_alias=True),
        }


def _format_errors(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}"
        for err in exc.errors()
    )


class EntrypointRegistry:
    """Ordered collection of entrypoints keyed by name."""

    def __init__(self):
        self._entrypoints: dict[str, Entrypoint] = {}

    def add(self, entrypoint: Entrypoint) -> None:
        if entrypoint.key in self._entrypoints:
            raise ValueError(f"Entrypoint '{entrypoint.key}' already registered")
        self._entrypoints[entrypoint.key] = entrypoint

    def get(self, key: str) -> Entrypoint:
        try:
            return self._entrypoints[key]
        except KeyError:
            raise NotFoundError(resource="Entrypoint", identifier=key) from None

    def entrypoints(self) -> list[Entrypoint]:
        return list(self._entrypoints.values())

    def __contains__(self, key: str) -> bool:
        return key in self._entrypoints

    def __len__(self) -> int:
        return len(self._entrypoints)

    async def invoke(
        self,
        key: str,
        payload: dict[str, Any] | None,
        context: AgentContext,
    ) -> Any:
        """
        Validate input, run the handler and record the payment.

        Args:
            key: Entrypoint name
            payload: Raw input (None is treated as an empty object)
            context: Service handles passed to the handler

        Returns:
            JSON-ready output

        Raises:
            NotFoundError: Unknown entrypoint
            ValidationError: Input does not match the entrypoint schema
            UpstreamError: ESPN failed (propagated unchanged)
        """
        entrypoint = self.get(key)

        try:
            params = entrypoint.input_model.model_validate(payload or {})
        except PydanticValidationError as e:
            raise ValidationError(
                message=f"Invalid input for '{key}'",
                detail=_format_errors(e),
            ) from None

        output = await entrypoint.handler(params, context)

        if not entrypoint.is_free and context.tracker is not None:
            context.tracker.record(key, entrypoint.price)

        if isinstance(output, BaseModel):
            output = output.model_dump(mode="json", by_alias=True)

        logger.info(f"Invoked '{key}' (price={entrypoint.price})")
        return output
