from collections import deque
from typing import Iterable

import numpy as np

from snake_state import BoardSnapshot, Position


class OccupancyGrid:
    """Blocked/free cells for one turn, indexed as ``cells[y, x]``."""

    def __init__(self, cells: np.ndarray):
        self.cells = cells
        self.cells.flags.writeable = False
        self.height, self.width = cells.shape

    @classmethod
    def build(cls, snapshot: BoardSnapshot) -> 'OccupancyGrid':
        cells = np.zeros((snapshot.height, snapshot.width), dtype=bool)

        def mark(positions: Iterable[Position]):
            for pos in positions:
                if 0 <= pos.x < snapshot.width and 0 <= pos.y < snapshot.height:
                    cells[pos.y, pos.x] = True

        for agent in snapshot.agents:
            mark(agent.solid_segments())
        mark(snapshot.hazards)
        return cls(cells)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_blocked(self, pos: Position) -> bool:
        """Out-of-bounds cells read as blocked."""
        if not self.in_bounds(pos):
            return True
        return bool(self.cells[pos.y, pos.x])

    def is_free(self, pos: Position) -> bool:
        return not self.is_blocked(pos)

    def free_count(self) -> int:
        return int(self.cells.size - np.count_nonzero(self.cells))


def flood_fill(grid: OccupancyGrid, start: Position) -> int:
    """Count the free cells reachable from ``start``, including ``start``."""
    if grid.is_blocked(start):
        return 0

    visited = {start.as_tuple()}
    queue = deque([start.as_tuple()])
    while queue:
        x, y = queue.popleft()
        for dx, dy in [(0, 1), (0, -1), (1, 0), (-1, 0)]:
            nxt = (x + dx, y + dy)
            if nxt in visited:
                continue
            if grid.is_blocked(Position(*nxt)):
                continue
            visited.add(nxt)
            queue.append(nxt)
    return len(visited)
