"""Saving and loading training sessions as ``key=value`` text files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from neuroforge.controller import TrainController
from neuroforge.genotype import (
    compress_genotype,
    decompress_genotype,
    format_genotype,
    parse_key_values,
)
from neuroforge.session import TrainingSession

PathLike = Union[str, Path]

DEFAULT_NAME = "Default"

_ATOI = re.compile(r"\s*([+-]?\d+)")
_ATOF = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _ATOF.match(text)
    return float(match.group(1)) if match else 0.0


def _class_path(obj: Any) -> str:
    target = obj if hasattr(obj, "__qualname__") else type(obj)
    return f"{target.__module__}.{target.__qualname__}"


def _session_name(session: TrainingSession) -> str:
    return session.setup.name or DEFAULT_NAME


def render_session_file(session: TrainingSession, genotype: Sequence[float]) -> str:
    """Return the text of a session file holding ``genotype`` and the population."""
    setup = session.setup
    population = setup.population
    agent = setup.agent
    lines = [
        "[SESSION DATA]",
        f"RandomSeed={session.random_seed}",
        f"MutationChance={population.mutation_chance:f}",
        f"RecombinationChance={population.recombination_chance:f}",
        f"NeuralInputs={agent.neural_inputs}",
        f"NeuralHiddenLayerSize={agent.neural_hidden_layer_size}",
        f"NeuralOutputs={agent.neural_outputs}",
        "",
        "[AGENT DATA]",
    ]
    if agent.controller is not None:
        lines.append(f"Controller={_class_path(agent.controller)}")
    if setup.neural_network is not None:
        lines.append(f"NeuralNetwork={_class_path(setup.neural_network)}")
    lines.append(f"Genotype={compress_genotype(genotype)}")
    lines += [
        "",
        "[POPULATION DATA]",
        f"PopulationSize={population.population_size}",
        f"MaxTimePerIndividual={population.max_time_per_individual}",
    ]
    lines += [
        f"Agent_{index}={compress_genotype(individual.genotype)}"
        for index, individual in enumerate(session.population)
        if individual is not None
    ]
    return "\n".join(lines) + "\n"


def save_session_data(
    session: TrainingSession,
    genotype: Sequence[float],
    directory: PathLike,
    name: Optional[str] = None,
) -> Path:
    """Write the session file ``<name>.txt`` into ``directory``, creating it if needed."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / f"{name or _session_name(session)}.txt"
    path.write_text(render_session_file(session, genotype), encoding="utf-8")
    return path


def save_best_genotype(session: TrainingSession, directory: PathLike) -> Path:
    """Save the best genotype found so far in the session."""
    if not session.best_genotype:
        raise ValueError("no best individual available to save")
    return save_session_data(session, session.best_genotype, directory, _session_name(session))


def save_current_genotype(session: TrainingSession, directory: PathLike) -> Path:
    """Save the genotype of the individual being evaluated."""
    individual = session.current_individual
    if individual is None:
        raise ValueError("current individual is not available to save")
    return save_session_data(session, individual.genotype, directory, _session_name(session))


def _restore_controller(session: TrainingSession, stored: str) -> None:
    factory = session.setup.agent.controller
    if factory is None or session.controller is None or _class_path(factory) != stored:
        return
    if _class_path(type(session.controller)) == stored:
        return
    controller = factory()
    if isinstance(controller, TrainController):
        controller.session = session
    session.controller = controller


def _restore_network(session: TrainingSession, stored: str) -> None:
    factory = session.setup.neural_network
    if factory is None or _class_path(factory) != stored:
        return
    if session.network is not None and _class_path(type(session.network)) == stored:
        return
    network = factory()
    if network is not None:
        session.network = network


def load_session_data(session: TrainingSession, path: PathLike) -> Dict[str, str]:
    """Restore settings and population from a session file; returns the parsed entries.

    Controller and network entries are honoured only when they name the
    factories already configured in the session's setup.
    """
    data = parse_key_values(Path(path).read_text(encoding="utf-8"))
    setup = session.setup
    population = setup.population
    agent = setup.agent

    if "RandomSeed" in data:
        session.random_seed = _atoi(data["RandomSeed"])
    if "MutationChance" in data:
        population.mutation_chance = _atof(data["MutationChance"])
    if "RecombinationChance" in data:
        population.recombination_chance = _atof(data["RecombinationChance"])
    if "NeuralInputs" in data:
        agent.neural_inputs = _atoi(data["NeuralInputs"])
    if "NeuralHiddenLayerSize" in data:
        agent.neural_hidden_layer_size = _atoi(data["NeuralHiddenLayerSize"])
    if "NeuralOutputs" in data:
        agent.neural_outputs = _atoi(data["NeuralOutputs"])

    if "Controller" in data:
        _restore_controller(session, data["Controller"])
    if "NeuralNetwork" in data:
        _restore_network(session, data["NeuralNetwork"])

    if session.network is not None:
        size = session.network.initialize(
            agent.neural_inputs, agent.neural_hidden_layer_size, agent.neural_outputs
        )
        if "PopulationSize" in data:
            population.population_size = _atoi(data["PopulationSize"])
        session.initialize_population(size)
        for index, individual in enumerate(session.population):
            key = f"Agent_{index}"
            if key in data and individual is not None:
                individual.genotype = decompress_genotype(data[key])
        session.current_index = 0
        if "MaxTimePerIndividual" in data:
            population.max_time_per_individual = _atoi(data["MaxTimePerIndividual"])
    return data


def import_genotype(path: PathLike) -> Optional[str]:
    """Return the ``Genotype`` entry of a session file as ``(g1,g2,...)``, if present."""
    data = parse_key_values(Path(path).read_text(encoding="utf-8"))
    if "Genotype" not in data:
        return None
    return format_genotype(decompress_genotype(data["Genotype"]))