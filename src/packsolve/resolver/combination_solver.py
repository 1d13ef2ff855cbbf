from __future__ import annotations

import functools
import logging
import time

from typing import TYPE_CHECKING
from typing import Generic
from typing import TypeVar

from packsolve.resolver.exceptions import SearchBudgetExceededError
from packsolve.resolver.exceptions import SolveFailureError


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Sequence


T = TypeVar("T")

logger = logging.getLogger(__name__)


class _Frame(Generic[T]):
    """
    The search state of one domain: its ordered candidates, the position of
    the next candidate to try and the shallower domains that rejected
    candidates here.
    """

    __slots__ = ("candidates", "conflict_set", "position", "selected")

    def __init__(self, candidates: list[T]) -> None:
        self.candidates = candidates
        self.position = 0
        self.selected: T | None = None
        self.conflict_set: set[int] = set()

    def reset(self) -> None:
        self.position = 0
        self.selected = None
        self.conflict_set.clear()


class CombinationSolver(Generic[T]):
    """
    Picks one item from every domain so that no two picked items conflict.

    Domains are visited in the order they are given and the items of a domain
    are tried in the order of the comparison function, so the solution
    returned is the first one a depth-first search would reach.

    When every item of a domain has been rejected the search jumps back to
    the deepest domain involved in those rejections instead of the previous
    one. The domains jumped over cannot change the outcome, so the result is
    the same as with plain chronological backtracking.

    A solver keeps the state of a single search and must not be shared
    between concurrent calls.
    """

    def __init__(self, max_steps: int | None = None) -> None:
        self._max_steps = max_steps
        self._attempted_solutions = 0
        self._conflicts: dict[tuple[T, T], None] = {}

    @property
    def attempted_solutions(self) -> int:
        return self._attempted_solutions

    @property
    def conflicts(self) -> list[tuple[T, T]]:
        """
        Rejected pairs (earlier pick, later candidate) seen during the search.
        """
        return list(self._conflicts)

    def find_solution(
        self,
        domains: Sequence[Sequence[T]],
        compare: Callable[[T, T], int],
        should_reject_pair: Callable[[T, T], bool],
    ) -> list[T]:
        start = time.time()
        key = functools.cmp_to_key(compare)
        frames = [_Frame(sorted(domain, key=key)) for domain in domains]

        try:
            return self._search(frames, should_reject_pair)
        finally:
            logger.debug(
                "Version solving took %.3f seconds.\nTried %d solutions.",
                time.time() - start,
                self._attempted_solutions,
            )

    def _search(
        self, frames: list[_Frame[T]], should_reject_pair: Callable[[T, T], bool]
    ) -> list[T]:
        depth = 0
        while depth < len(frames):
            frame = frames[depth]
            if self._select_next(frames, depth, should_reject_pair):
                depth += 1
                if depth < len(frames):
                    frames[depth].reset()

                continue

            # Every candidate of this domain was rejected.
            if not frame.conflict_set:
                raise SolveFailureError(list(self._conflicts))

            target = max(frame.conflict_set)
            frames[target].conflict_set.update(frame.conflict_set - {target})
            logger.debug("backjumping from domain %d to domain %d", depth, target)

            depth = target

        solution = []
        for frame in frames:
            assert frame.selected is not None
            solution.append(frame.selected)

        return solution

    def _select_next(
        self,
        frames: list[_Frame[T]],
        depth: int,
        should_reject_pair: Callable[[T, T], bool],
    ) -> bool:
        frame = frames[depth]
        frame.selected = None

        while frame.position < len(frame.candidates):
            candidate = frame.candidates[frame.position]
            frame.position += 1

            self._attempted_solutions += 1
            if (
                self._max_steps is not None
                and self._attempted_solutions > self._max_steps
            ):
                raise SearchBudgetExceededError(self._max_steps)

            for index in range(depth):
                selected = frames[index].selected
                if should_reject_pair(selected, candidate):
                    frame.conflict_set.add(index)
                    self._conflicts.setdefault((selected, candidate), None)
                    break
            else:
                frame.selected = candidate

                return True

        return False
