"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Frozen, compared by content. Unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class RootValueObject(RootModel[T], Generic[T]):
    """Single wrapped primitive, read via ``.root``.

    Dumps to the bare primitive, so entities holding one serialise flat.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
