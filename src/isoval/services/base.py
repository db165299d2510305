"""BaseService: shared foundation for isoval services.

Every service receives the frozen :class:`IsovalSettings` at construction
and derives its validation policy and codec options from them.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from isoval.domain.policy import ValidationPolicy

if TYPE_CHECKING:
    from isoval.config.settings import IsovalSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate_document(self, source: bytes) -> ServiceResult:
                started = self._clock()
                ...
    """

    def __init__(self, settings: IsovalSettings) -> None:
        self._settings = settings

    @property
    def policy(self) -> ValidationPolicy:
        return self._settings.validation.to_policy()

    @staticmethod
    def _clock() -> float:
        return time.perf_counter()

    @staticmethod
    def _meta(started: float, **extra: object) -> dict[str, object]:
        return {"duration_ms": round((time.perf_counter() - started) * 1000, 3), **extra}
