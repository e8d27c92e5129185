"""BaseService — shared foundation for fleetctl services.

Every service receives a :class:`FleetRepository` at construction time
and reports domain failures as ``ServiceResult(ok=False)`` instead of
raising.  Non-domain exceptions (storage faults, integrity errors)
propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fleetctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from fleetctl.domain.errors import FleetError
    from fleetctl.domain.repository import FleetRepository

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class FleetService(BaseService):
            def create_fleet(self, user_id: str) -> ServiceResult:
                try:
                    ...
                except FleetError as exc:
                    return self._failure("create_fleet", exc)
    """

    def __init__(self, repository: FleetRepository) -> None:
        self._repository = repository

    @staticmethod
    def _failure(op: str, exc: FleetError) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail),
        )
