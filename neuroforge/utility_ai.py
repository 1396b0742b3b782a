"""Utility AI: actions scored from considerations, and a brain that picks the best."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence


def _normalize_to_range(value: float, low: float, high: float) -> float:
    if low == high:
        return low if value < low else 1.0
    return (value - low) / (high - low)


@dataclass
class Consideration:
    """One factor weighing into an action's score.

    Subclasses override :meth:`get_score` to rate the situation of an actor.
    """

    name: str = "Consideration Name"
    score: float = 0.0
    curve: Optional[Callable[[float], float]] = None

    def get_score(self, actor: Any) -> float:
        """The stored score, or 0 when there is no actor."""
        if actor is not None:
            return self.score
        return 0.0

    def set_score(self, value: float) -> None:
        self.score = _normalize_to_range(value, 0.0, 1.0)


@dataclass
class Action:
    """Something the agent can do, rated by its considerations."""

    name: str = "Action Name"
    score: float = 0.0
    considerations: List[Optional[Consideration]] = field(default_factory=list)
    owner: Any = None

    def set_score(self, value: float) -> None:
        self.score = _normalize_to_range(value, 0.0, 1.0)

    def execute(self, actor: Any) -> None:
        """Carry out the action for ``actor``.

        The base action only records the actor as its owner; subclasses
        extend this with the actual behaviour.
        """
        self.owner = actor


@dataclass
class Brain:
    """Scores the possible actions of its owner and keeps the best one."""

    owner: Any = None
    possible_actions: List[Optional[Action]] = field(default_factory=list)
    best_action: Optional[Action] = None

    def score_action(self, action: Optional[Action]) -> float:
        """Combine the consideration scores of ``action`` and store the result on it.

        Each score is compensated for the number of considerations, so that
        actions with many factors are not punished by the product.
        """
        if action is None or not action.considerations:
            return 0.0
        modification_factor = 1.0 - 1.0 / len(action.considerations)
        score = 1.0
        for consideration in action.considerations:
            if consideration is None or self.owner is None:
                continue
            value = consideration.get_score(self.owner)
            make_up = (1.0 - value) * modification_factor
            score *= value + make_up * value
        action.set_score(score)
        return action.score

    def choose_action(self, actions: Sequence[Optional[Action]]) -> Optional[Action]:
        """Pick the highest scoring action; the first one wins when none scores above 0."""
        if not actions:
            return self.best_action
        best_score = 0.0
        best_index = 0
        for index, action in enumerate(actions):
            if action is not None and self.score_action(action) > best_score:
                best_index = index
                best_score = action.score
        self.best_action = actions[best_index]
        return self.best_action

    def think(self) -> Optional[Action]:
        """Choose a new action among the possible ones."""
        return self.choose_action(self.possible_actions)