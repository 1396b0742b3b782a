import random

import pytest

from neuroforge.individual import Individual


def test_random_genes_within_range_and_size():
    individual = Individual.random(random.Random(1), 50)
    assert individual.size == 50
    assert all(-4.0 <= gene <= 4.0 for gene in individual.genotype)
    assert individual.fitness == 0.0


def test_random_is_deterministic_for_seed():
    first = Individual.random(random.Random(7), 10)
    second = Individual.random(random.Random(7), 10)
    assert first.genotype == second.genotype


def test_from_genotype_size_mismatch_raises():
    with pytest.raises(ValueError):
        Individual.from_genotype(random.Random(0), 3, [1.0, 2.0])


def test_from_genotype_without_mutation_keeps_genes():
    genes = [0.1, 0.2, 0.3]
    individual = Individual.from_genotype(random.Random(0), 3, genes)
    assert individual.genotype == genes
    individual.genotype[0] = 9.0
    assert genes[0] == 0.1


def test_from_genotype_with_full_mutation_shifts_within_bounds():
    genes = [0.0] * 20
    individual = Individual.from_genotype(random.Random(3), 20, genes, 1.0)
    assert all(-0.5 <= gene <= 0.5 for gene in individual.genotype)
    assert individual.genotype != genes


def test_mutate_zero_probability_is_identity():
    individual = Individual(genotype=[1.0, 2.0, 3.0])
    individual.mutate(0.0, random.Random(5))
    assert individual.genotype == [1.0, 2.0, 3.0]


def test_mutate_full_probability_bounded_change():
    original = [1.0, -2.0, 3.0, 0.5]
    individual = Individual(genotype=list(original))
    individual.mutate(1.0, random.Random(11))
    for before, after in zip(original, individual.genotype):
        assert abs(after - before) <= 0.5
    assert individual.genotype != original


def test_copy_from_copies_independently():
    source = Individual(genotype=[1.0, 2.0])
    target = Individual(genotype=[5.0])
    target.copy_from(source)
    assert target.genotype == [1.0, 2.0]
    target.genotype[0] = 7.0
    assert source.genotype == [1.0, 2.0]


def test_copy_from_none_leaves_unchanged():
    target = Individual(genotype=[5.0, 6.0])
    target.copy_from(None)
    assert target.genotype == [5.0, 6.0]


def test_size_setter_pads_and_truncates():
    individual = Individual(genotype=[1.0, 2.0])
    individual.size = 4
    assert individual.genotype == [1.0, 2.0, 0.0, 0.0]
    individual.size = 1
    assert individual.genotype == [1.0]


def test_recombine_zero_probability_is_identity():
    mine = Individual(genotype=[0.0] * 10)
    other = Individual(genotype=[1.0] * 10)
    mine.recombine(other, 0.0, random.Random(2))
    assert mine.genotype == [0.0] * 10


@pytest.mark.parametrize("seed", range(10))
def test_recombine_takes_inner_contiguous_segment(seed):
    mine = Individual(genotype=[0.0] * 10)
    other = Individual(genotype=[1.0] * 10)
    mine.recombine(other, 1.0, random.Random(seed))
    taken = [i for i, gene in enumerate(mine.genotype) if gene == 1.0]
    assert taken
    assert taken == list(range(taken[0], taken[-1] + 1))
    assert mine.genotype[0] == 0.0
    assert mine.genotype[-1] == 0.0
    assert other.genotype == [1.0] * 10


def test_recombine_with_none_is_noop():
    mine = Individual(genotype=[0.0, 1.0, 2.0])
    mine.recombine(None, 1.0, random.Random(0))
    assert mine.genotype == [0.0, 1.0, 2.0]