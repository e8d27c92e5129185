"""FleetRepository — the persistence port consumed by application handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fleetctl.domain.fleet import Fleet
    from fleetctl.domain.ids import FleetId, UserId


class FleetRepository(Protocol):
    """Load and persist whole Fleet aggregates."""

    def save(self, fleet: Fleet) -> None:
        """Persist the complete current state of *fleet* atomically."""
        ...

    def find_one_by_id(self, fleet_id: FleetId) -> Fleet | None: ...

    def find_many_by_user_id(self, user_id: UserId) -> list[Fleet]: ...

    def exists(
        self,
        *,
        fleet_id: FleetId | None = None,
        user_id: UserId | None = None,
    ) -> bool:
        """True if a fleet matches *fleet_id* (checked first) or *user_id*.

        No filter yields False.
        """
        ...
