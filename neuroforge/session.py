"""Generational training of a neural network population."""

from __future__ import annotations

import random
from itertools import islice
from typing import List, Optional, Sequence

from neuroforge.controller import TrainController
from neuroforge.individual import Individual
from neuroforge.network import BaseNetwork
from neuroforge.types import SessionOverride, SessionSetup, has_active_flag

NO_INDEX = -1


class TrainingSession:
    """Evolves a population of genotypes by evaluating them one at a time.

    Time advances through :meth:`heartbeat`, called once per second of
    evaluation. Every individual runs until it reaches the time limit or is
    ended early; once the whole population has run, the next generation is
    bred by tournament selection, two-point crossover and mutation, and the
    best individual of the generation is carried over.
    """

    def __init__(
        self,
        setup: Optional[SessionSetup] = None,
        random_seed: int = 0,
        network: Optional[BaseNetwork] = None,
    ) -> None:
        self.setup = setup if setup is not None else SessionSetup()
        self.random_seed = random_seed
        self.rng = random.Random(random_seed)
        self.controller: Optional[TrainController] = None
        self.network = network
        self.population: List[Individual] = []
        self.next_population: List[Individual] = []
        self.generation = 0
        self.best_individual: Optional[Individual] = None
        self.current_index = 0
        self.average_fitness = 0.0
        self.fitness_sum = 0.0
        self.best_fitness_in_generation = 0.0
        self.best_fitness_in_session = 0.0
        self.best_fitness_run = 0.0
        self.best_individual_id = 0
        self.best_generation_id = 0
        self.individual_time = 0
        self.current_individual_finished = False
        self.is_training = False
        self.running = False
        self.best_genotype: List[float] = []
        self.override_flags = SessionOverride.NONE
        self.override_genotype: List[float] = []

    @property
    def current_individual(self) -> Optional[Individual]:
        """The individual being evaluated, if the index points at one."""
        if 0 <= self.current_index < len(self.population):
            return self.population[self.current_index]
        return None

    def apply_setup(self, setup: SessionSetup) -> None:
        """Use ``setup``; builds its network when both a network and a controller are given."""
        self.setup = setup
        if setup.neural_network is not None and setup.agent.controller is not None:
            network = setup.neural_network()
            if network is not None:
                self.network = network

    def set_population_parameters(
        self, population_size: int, max_time_per_individual: int
    ) -> None:
        self.setup.population.population_size = population_size
        self.setup.population.max_time_per_individual = max_time_per_individual

    def set_mutation_and_recombination_parameters(
        self, mutation_chance: float, recombination_chance: float
    ) -> None:
        self.setup.population.mutation_chance = mutation_chance
        self.setup.population.recombination_chance = recombination_chance

    def set_network_structure(self, inputs: int, hidden: int, outputs: int) -> None:
        agent = self.setup.agent
        agent.neural_inputs = inputs
        agent.neural_hidden_layer_size = hidden
        agent.neural_outputs = outputs

    def start(self, controller: TrainController) -> None:
        """Attach ``controller``, build the first population and begin training."""
        self.rng = random.Random(self.random_seed)
        self.controller = controller
        if controller.session is None:
            controller.session = self
        controller.begin_play()
        if self.network is None:
            raise RuntimeError("no neural network configured for the session")
        agent = self.setup.agent
        size = self.network.initialize(
            agent.neural_inputs, agent.neural_hidden_layer_size, agent.neural_outputs
        )
        self.initialize_population(size)
        self.reset_session_values()
        self.running = True

    def initialize_population(self, individual_size: int) -> None:
        """Create a fresh population, each member seeded from its own stream."""
        mutation_chance = None
        if has_active_flag(self.override_flags, SessionOverride.MUTATE_GENOTYPE_INJECTION):
            mutation_chance = self.setup.population.mutation_chance
        inject = has_active_flag(self.override_flags, SessionOverride.INJECT_GENOTYPE)

        population = []
        for index in range(self.setup.population.population_size):
            stream = random.Random(self.random_seed + self.generation + index)
            if inject:
                individual = Individual.from_genotype(
                    stream, individual_size, self.override_genotype, mutation_chance
                )
            else:
                individual = Individual.random(stream, individual_size)
            population.append(individual)
        self.population = population

    def reset_session_values(self) -> None:
        self.current_index = NO_INDEX
        self.average_fitness = 0.0
        self.fitness_sum = 0.0
        self.individual_time = 0
        self.current_individual_finished = True
        self.is_training = True

    def heartbeat(self) -> None:
        """Advance the session clock by one second."""
        if not self.is_training:
            return
        self.individual_time += 1
        if self.individual_time >= self.setup.population.max_time_per_individual:
            self.end_current_evaluation()
            return
        if not (
            self.current_individual_finished
            and self.controller is not None
            and self.network is not None
        ):
            return
        self.controller.on_reset_requested()
        self.current_index += 1
        if self.current_index == self.setup.population.population_size:
            self.next_generation()
            return
        individual = self.current_individual
        if individual is not None:
            self.network.set_weights(individual.genotype)
            self.current_individual_finished = False

    def end_current_evaluation(self) -> None:
        """Score the current individual and record it if it is the best so far."""
        individual = self.current_individual
        if not self.is_training or individual is None:
            return
        fitness = self.compute_fitness()
        self.fitness_sum += fitness
        individual.fitness = fitness
        if fitness > self.best_fitness_in_generation:
            self.best_fitness_in_generation = fitness
            self.best_individual = individual
            if fitness > self.best_fitness_in_session:
                self.best_fitness_in_session = fitness
                self.best_individual_id = self.current_index
                self.best_generation_id = self.generation
                self.best_genotype = list(individual.genotype)
        self.individual_time = 0
        self.current_individual_finished = True

    def compute_fitness(self) -> float:
        """Fitness reported by the controller, or -1 without one."""
        if self.controller is not None:
            return self.controller.compute_fitness()
        return -1.0

    def next_generation(self) -> None:
        """Breed the next population and carry over the best individual."""
        self.average_fitness = self.fitness_sum / float(self.setup.population.population_size)
        self.best_fitness_run = self.best_fitness_in_generation
        self.fitness_sum = 0.0
        self.current_index = NO_INDEX

        self.natural_selection()
        self.recombine()
        self.mutate()

        elite = Individual()
        elite.copy_from(self.best_individual)
        self.next_population.append(elite)
        self.population = list(self.next_population)

        self.generation += 1
        self.current_individual_finished = True
        self.best_fitness_in_generation = 0.0

    def natural_selection(self) -> None:
        """Fill the next population by binary tournaments over the current one."""
        size = self.setup.population.population_size
        selected = []
        for _ in range(size):
            first = self.population[self.rng.randrange(size)]
            second = self.population[self.rng.randrange(size)]
            winner = first if first.fitness >= second.fitness else second
            chosen = Individual()
            chosen.copy_from(winner)
            selected.append(chosen)
        self.next_population = selected

    def recombine(self) -> None:
        """Cross over consecutive pairs of the next population."""
        last = int(len(self.next_population) * 0.5 - 1.0)
        if last <= 0:
            return
        chance = self.setup.population.recombination_chance
        pairs = zip(self.next_population[0::2], self.next_population[1::2])
        for first, second in islice(pairs, last):
            first.recombine(second, chance, self.rng)

    def mutate(self) -> None:
        """Mutate every member of the current population."""
        chance = self.setup.population.mutation_chance
        for individual in self.population:
            individual.mutate(chance, self.rng)

    def stop(self) -> None:
        """Stop training after one final heartbeat."""
        if not self.running or self.controller is None:
            return
        self.is_training = False
        self.heartbeat()
        self.running = False

    def current_individual_fitness(self) -> float:
        """Fitness the controller reports right now, or 0 without one."""
        if self.controller is not None:
            return self.controller.compute_fitness()
        return 0.0

    def set_override_genotype(self, genotype: Sequence[float]) -> None:
        """Genotype injected into new populations when the override flag is set."""
        self.override_genotype = [float(gene) for gene in genotype]