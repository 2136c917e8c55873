"""Base model for domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    State changes go through ``evolve``, which re-runs model validators;
    ``model_copy(update=...)`` would skip them.
    """

    model_config = ConfigDict(frozen=True)

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with ``changes`` applied."""
        return self.model_validate({**self.model_dump(), **changes})
