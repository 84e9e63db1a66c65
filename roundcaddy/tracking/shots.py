"""Mark shot locations against the current GPS fix."""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional, Tuple

from roundcaddy.geo.distance import calculate_shot_distance
from roundcaddy.telemetry.events import record_shot_marked

from .schemas import Shot
from .session import GPSTrackingSession

logger = logging.getLogger(__name__)


class ShotTracker:
    """Shot list for a round, ordered by marking time.

    Distances are measured from the previous mark regardless of hole, so the
    first shot on a new hole reports how far the player walked from the last
    shot of the previous one.
    """

    def __init__(self, session: GPSTrackingSession, hole_number: int = 1) -> None:
        if hole_number < 1:
            raise ValueError("hole_number must be >= 1")
        self._session = session
        self._hole_number = hole_number
        self._shots: List[Shot] = []

    @property
    def hole_number(self) -> int:
        return self._hole_number

    @property
    def shots(self) -> Tuple[Shot, ...]:
        return tuple(self._shots)

    @property
    def last_shot_distance(self) -> Optional[int]:
        if len(self._shots) < 2:
            return None
        previous, latest = self._shots[-2], self._shots[-1]
        return calculate_shot_distance(
            previous.position.point, latest.position.point
        )

    def set_hole(self, hole_number: int) -> None:
        if hole_number < 1:
            raise ValueError("hole_number must be >= 1")
        self._hole_number = hole_number

    def shots_for_hole(self, hole_number: int) -> List[Shot]:
        return [shot for shot in self._shots if shot.hole_number == hole_number]

    def mark_shot(self, club: Optional[str] = None) -> Optional[Shot]:
        position = self._session.position
        if position is None:
            logger.debug("mark_shot ignored, no position fix yet")
            return None

        distance: Optional[int] = None
        if self._shots:
            distance = calculate_shot_distance(
                self._shots[-1].position.point, position.point
            )

        shot = Shot(
            id=str(uuid.uuid4()),
            hole_number=self._hole_number,
            shot_number=len(self.shots_for_hole(self._hole_number)) + 1,
            position=position,
            club=club,
            distance=distance,
        )
        self._shots.append(shot)
        record_shot_marked(
            shot.hole_number, shot.shot_number, club=club, distance_yards=distance
        )
        return shot

    def clear_shots(self) -> None:
        self._shots.clear()

    def hand_off(self) -> List[Shot]:
        """Return every marked shot and start a fresh list."""

        shots = list(self._shots)
        self._shots.clear()
        return shots


__all__ = ["ShotTracker"]
