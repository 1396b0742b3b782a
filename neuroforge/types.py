"""Session configuration types and override flags."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union

_FLAG_MASK = 0xFF

Vector = Tuple[float, float, float]


class SessionOverride(enum.IntFlag):
    """Overrides applied to a training session, stored as 8-bit flags."""

    NONE = 0
    INJECT_GENOTYPE = 1 << 0
    MUTATE_GENOTYPE_INJECTION = 1 << 1
    INJECT_POPULATION = 1 << 2
    MUTATE_POPULATION_INJECTION = 1 << 3


FlagLike = Union[int, SessionOverride]


def has_active_flag(flags: FlagLike, flag: FlagLike) -> bool:
    """Return whether ``flag`` is set in ``flags``."""
    return bool(int(flags) & int(flag) & _FLAG_MASK)


def activate_flag(flags: FlagLike, flag: FlagLike) -> SessionOverride:
    """Return ``flags`` with ``flag`` switched on."""
    return SessionOverride((int(flags) | int(flag)) & _FLAG_MASK)


@dataclass
class AgentSetup:
    """The agent being trained and the shape of its network."""

    pawn: Optional[str] = None
    controller: Optional[Callable[..., Any]] = None
    neural_inputs: int = 1
    neural_hidden_layer_size: int = 1
    neural_outputs: int = 1


@dataclass
class GymSetup:
    """Where the training takes place."""

    level: Optional[str] = None
    initial_spawn_location: Vector = (0.0, 0.0, 0.0)
    initial_spawn_rotation: Vector = (0.0, 0.0, 0.0)


@dataclass
class PopulationSetup:
    """Parameters of the evolving population."""

    population_size: int = 20
    max_time_per_individual: int = 30
    mutation_chance: float = 0.05
    recombination_chance: float = 0.8


@dataclass
class SessionSetup:
    """Everything needed to run a training session."""

    name: str = ""
    neural_network: Optional[Callable[[], Any]] = None
    population: PopulationSetup = field(default_factory=PopulationSetup)
    agent: AgentSetup = field(default_factory=AgentSetup)
    gym: GymSetup = field(default_factory=GymSetup)