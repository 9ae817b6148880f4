"""Hunt/target shot selection for the computer opponent."""
from __future__ import annotations

import logging
import random
from collections import deque
from enum import Enum
from typing import Deque, List, Optional

from models import Board, Coord
from logic.battle import HIT, INVALID, MISS, REPEAT
from logic.parser import all_coords, format_coord, parse_coord

logger = logging.getLogger(__name__)


class TargetMode(Enum):
    HUNT = "hunt"
    TARGET = "target"


def _orthogonal_neighbors(coord: Coord) -> List[Coord]:
    r, c = coord
    neighbours: List[Coord] = []
    # up, down, left, right
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        candidate = (r + dr, c + dc)
        if Board.in_bounds(candidate):
            neighbours.append(candidate)
    return neighbours


class BotTargeting:
    """Shot picker that searches randomly until it hits something.

    ``available`` holds every label that has not been fired at yet.  After a
    hit the untried orthogonal neighbours of that cell are queued and fired
    at first-in-first-out before random search resumes.  The mode is derived
    from the queue, so it can never disagree with it.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.available: List[str] = all_coords()
        self.queue: Deque[str] = deque()
        self.last_hit: Optional[str] = None

    @property
    def mode(self) -> TargetMode:
        return TargetMode.TARGET if self.queue else TargetMode.HUNT

    @property
    def hunt_mode(self) -> bool:
        return self.mode is TargetMode.HUNT

    def pick_next_shot(self) -> Optional[str]:
        """Return the next label to fire at or ``None`` when nothing is left."""
        target = None
        while self.queue:
            candidate = self.queue.popleft()
            if candidate in self.available:
                target = candidate
                break
        if target is None:
            if not self.available:
                logger.warning("Bot has no targets left")
                return None
            target = self.available[self.rng.randrange(len(self.available))]
        self.available.remove(target)
        return target

    def record_outcome(self, label: str, outcome: str) -> None:
        if outcome == HIT:
            self.last_hit = label
            added = self._queue_neighbors(label)
            logger.debug("Hit at %s, queued %s", label, added)
        elif outcome in (MISS, REPEAT, INVALID):
            # nothing to follow up; hunting resumes once the queue drains
            return
        else:
            raise ValueError(f"Unknown shot outcome: {outcome!r}")

    def _queue_neighbors(self, label: str) -> List[str]:
        coord = parse_coord(label)
        if coord is None:
            return []
        added: List[str] = []
        for neighbour in _orthogonal_neighbors(coord):
            candidate = format_coord(neighbour)
            if candidate in self.available and candidate not in self.queue:
                self.queue.append(candidate)
                added.append(candidate)
        return added
