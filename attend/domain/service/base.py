"""Base class for domain services."""

from contextlib import AbstractContextManager
from typing import Any, ClassVar

import logfire


class Service:
    """Base class for domain services.

    Each operation runs inside a logfire span named
    ``<span_prefix>.<operation>``.
    """

    span_prefix: ClassVar[str]

    def _span(self, operation: str, **attributes: Any) -> AbstractContextManager[Any]:
        name = f"{self.span_prefix}.{operation}"
        return logfire.span(name, **attributes)
