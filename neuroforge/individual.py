"""A member of the evolving population: a genotype and its fitness."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

GENE_RANGE = (-4.0, 4.0)
MUTATION_RANGE = (-0.5, 0.5)


def _int_in_range(rng: random.Random, low: int, high: int) -> int:
    """Inclusive random integer; an empty range yields ``low``."""
    if high < low:
        return low
    return rng.randint(low, high)


@dataclass
class Individual:
    """A genotype of network weights together with the fitness it scored."""

    genotype: List[float] = field(default_factory=list)
    fitness: float = 0.0

    @classmethod
    def random(cls, rng: random.Random, size: int) -> "Individual":
        """Create an individual whose genes are drawn uniformly from [-4, 4]."""
        low, high = GENE_RANGE
        return cls(genotype=[rng.uniform(low, high) for _ in range(size)])

    @classmethod
    def from_genotype(
        cls,
        rng: random.Random,
        size: int,
        genotype: Sequence[float],
        mutation_chance: Optional[float] = None,
    ) -> "Individual":
        """Create an individual from a given genotype.

        When ``mutation_chance`` is given the injected genotype is mutated
        with that probability per gene.
        """
        if size != len(genotype):
            raise ValueError(
                f"genotype size {len(genotype)} does not match the expected size {size}"
            )
        individual = cls(genotype=[float(gene) for gene in genotype])
        if mutation_chance is not None:
            individual.mutate(mutation_chance, rng)
        return individual

    @property
    def size(self) -> int:
        """Number of genes."""
        return len(self.genotype)

    @size.setter
    def size(self, value: int) -> None:
        if value < 0:
            raise ValueError("size cannot be negative")
        current = len(self.genotype)
        if value < current:
            del self.genotype[value:]
        else:
            self.genotype.extend([0.0] * (value - current))

    def copy_from(self, other: Optional["Individual"]) -> None:
        """Take over the genotype of ``other``; ``None`` leaves this unchanged."""
        if other is not None:
            self.genotype = list(other.genotype)

    def recombine(
        self, other: Optional["Individual"], probability: float, rng: random.Random
    ) -> None:
        """Two-point crossover: with ``probability``, copy a segment of ``other``.

        The segment lies strictly inside the genotype, so the first and last
        genes are never exchanged. ``other`` itself is left untouched.
        """
        if other is None:
            return
        if rng.random() >= probability:
            return
        length = len(self.genotype)
        first_cut = _int_in_range(rng, 1, length - 2)
        second_cut = _int_in_range(rng, first_cut + 1, length - 1)
        end = min(second_cut, length, len(other.genotype))
        if first_cut < end:
            self.genotype[first_cut:end] = other.genotype[first_cut:end]

    def mutate(self, probability: float, rng: random.Random) -> None:
        """Shift each gene, with ``probability``, by a value in [-0.5, 0.5]."""
        low, high = MUTATION_RANGE
        mutated = []
        for gene in self.genotype:
            if rng.random() < probability:
                gene += rng.uniform(low, high)
            mutated.append(gene)
        self.genotype = mutated