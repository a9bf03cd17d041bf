"""Step-by-step maze generators working on a :class:`MazeWorld`."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Set

from proclab.maze.world import CLEAR_COLOR, Direction, MazeWorld, NodeColor, Point

_CLOCKWISE = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


def _open_between(world: MazeWorld, current: Point, target: Point) -> None:
    world.set_wall(current, Direction.towards(target - current), False)


class MazeGenerator(ABC):
    """A maze generator advanced one step at a time."""

    name = ""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def step(self, world: MazeWorld) -> bool:
        """Advance by one step; return False once the maze is finished."""

    @abstractmethod
    def clear(self, world: MazeWorld) -> None:
        """Forget all progress, ready to start on ``world``."""

    def run(self, world: MazeWorld) -> int:
        """Clear, then step until finished; return the number of productive steps."""
        self.clear(world)
        steps = 0
        while self.step(world):
            steps += 1
        return steps


class _DepthFirst(MazeGenerator):
    """Shared state of the stack-based generators."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)
        self.stack: List[Point] = []
        self.visited: Set[Point] = set()

    def clear(self, world: MazeWorld) -> None:
        self.stack.clear()
        self.visited.clear()

    def _first_unvisited(self, world: MazeWorld) -> Optional[Point]:
        return next((p for p in world.points() if p not in self.visited), None)

    def _visitables(self, world: MazeWorld, point: Point) -> List[Point]:
        found = []
        for direction in _CLOCKWISE:
            neighbour = point + direction.delta
            if (world.contains(neighbour) and neighbour not in self.visited
                    and world.has_wall(point, direction)):
                found.append(neighbour)
        return found

    def _go_deeper(self, world: MazeWorld, current: Point) -> bool:
        """Push a random unvisited neighbour; return False if there is none."""
        visitables = self._visitables(world, current)
        if not visitables:
            return False
        following = self.rng.choice(visitables)
        world.set_node_color(following, NodeColor.GREEN)
        self.stack.append(following)
        _open_between(world, current, following)
        return True


class RecursiveBacktracker(_DepthFirst):
    """Depth-first carving that backtracks one cell at a time."""

    name = "Recursive Back-Tracker"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)

    def step(self, world: MazeWorld) -> bool:
        if not self.stack:
            start = self._first_unvisited(world)
            if start is None:
                return False
            self.stack.append(start)
            world.set_node_color(start, NodeColor.DEEP_RED)

        current = self.stack[-1]
        self.visited.add(current)
        world.set_node_color(current, NodeColor.DEEP_RED)

        if not self._go_deeper(world, current):
            self.stack.pop()
            world.set_node_color(current, NodeColor.BLACK)
        return True

    def clear(self, world: MazeWorld) -> None:
        super().clear(world)


class HuntAndKillExample(_DepthFirst):
    """Random walks; each new walk starts at the first unvisited cell."""

    name = "HuntAndKill"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)

    def _visited_neighbours(self, world: MazeWorld, point: Point) -> List[Point]:
        found = []
        for direction in (Direction.WEST, Direction.NORTH, Direction.EAST, Direction.SOUTH):
            neighbour = point + direction.delta
            if (world.contains(neighbour) and neighbour in self.visited
                    and world.has_wall(point, direction)):
                found.append(neighbour)
        return found

    def step(self, world: MazeWorld) -> bool:
        if not self.stack:
            start = self._first_unvisited(world)
            if start is None:
                return False
            self.stack.append(start)
            if start != Point(-world.half, -world.half):
                # connect the new walk to the part already carved
                neighbours = self._visited_neighbours(world, start)
                if not neighbours:
                    return False
                _open_between(world, start, self.rng.choice(neighbours))

        current = self.stack[-1]
        self.visited.add(current)
        world.set_node_color(current, NodeColor.DEEP_RED)

        if not self._go_deeper(world, current):
            for point in self.stack:
                world.set_node_color(point, NodeColor.BLACK)
            self.stack.clear()
        return True

    def clear(self, world: MazeWorld) -> None:
        super().clear(world)


class HuntAndKill(MazeGenerator):
    """Random walk from a random start; hunts for a new cell when stuck."""

    name = "Hunt & Kill"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)
        self.current: Optional[Point] = None
        self.visited: Set[Point] = set()

    def _random_start(self, world: MazeWorld) -> Optional[Point]:
        x = self.rng.randint(-world.half, world.half)
        y = self.rng.randint(-world.half, world.half)
        point = Point(x, y)
        return None if point in self.visited else point

    def _visitable(self, world: MazeWorld, target: Point) -> bool:
        return (world.contains(target) and target not in self.visited
                and world.has_wall(target, Direction.NORTH))

    def _walk(self, world: MazeWorld) -> bool:
        if self.current is None:
            self.current = self._random_start(world)
            if self.current is None:
                return False

        current = self.current
        self.visited.add(current)
        world.set_node_color(current, NodeColor.BLACK)

        candidates = [current + d.delta for d in _CLOCKWISE]
        self.rng.shuffle(candidates)
        following = next((c for c in candidates if self._visitable(world, c)), None)
        if following is None:
            return False

        _open_between(world, current, following)
        self.current = following
        return True

    def _hunt(self, world: MazeWorld) -> bool:
        connection: Optional[Point] = None
        for point in world.points():
            if point in self.visited:
                continue
            for direction in _CLOCKWISE:
                neighbour = point + direction.delta
                if world.contains(neighbour) and neighbour in self.visited:
                    connection = neighbour
                    self.current = point
                    break

        if connection is None:
            return False
        _open_between(world, self.current, connection)
        return True

    def step(self, world: MazeWorld) -> bool:
        return self._walk(world) or self._hunt(world)

    def clear(self, world: MazeWorld) -> None:
        self.current = None
        self.visited.clear()


class Prim(MazeGenerator):
    """Randomised Prim: grows the maze from a frontier of queued cells."""

    name = "Prim"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)
        self.to_be_visited: List[Point] = []
        self.initialized = False

    def _visitables(self, world: MazeWorld, point: Point) -> List[Point]:
        return [
            point + d.delta for d in _CLOCKWISE
            if world.contains(point + d.delta)
            and world.node_color(point + d.delta) is CLEAR_COLOR
        ]

    def _visited_neighbours(self, world: MazeWorld, point: Point) -> List[Point]:
        found = []
        for direction in (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST):
            neighbour = point + direction.delta
            if (world.contains(neighbour)
                    and world.node_color(neighbour) is NodeColor.BLACK
                    and world.has_wall(point, direction)):
                found.append(neighbour)
        return found

    def step(self, world: MazeWorld) -> bool:
        if not self.initialized:
            self.initialized = True
            start = Point(-world.half, -world.half)
            self.to_be_visited.append(start)
            world.set_node_color(start, NodeColor.DARK_RED)
            return True

        if not self.to_be_visited:
            return False

        current = self.to_be_visited.pop(self.rng.randrange(len(self.to_be_visited)))
        world.set_node_color(current, NodeColor.BLACK)

        for point in self._visitables(world, current):
            self.to_be_visited.append(point)
            world.set_node_color(point, NodeColor.DARK_RED)

        neighbours = self._visited_neighbours(world, current)
        if neighbours:
            _open_between(world, current, self.rng.choice(neighbours))
        return True

    def clear(self, world: MazeWorld) -> None:
        self.to_be_visited.clear()
        self.initialized = False


GENERATORS: Dict[str, type] = {
    cls.name: cls for cls in (RecursiveBacktracker, HuntAndKillExample, HuntAndKill, Prim)
}