"""Controllers that drive an agent through a neural network."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, Sequence

from neuroforge.network import BaseNetwork
from neuroforge.types import SessionSetup

UNSET = -1


class _Session(Protocol):
    setup: SessionSetup
    network: Optional[BaseNetwork]

    def end_current_evaluation(self) -> Any:
        ...


class RuntimeController:
    """Runs a trained genotype: feeds inputs to the network and handles outputs.

    Subclasses override :meth:`feed_inputs` and :meth:`handle_outputs`.
    """

    def __init__(
        self,
        network_class: Optional[Callable[[], BaseNetwork]] = None,
        input_size: int = UNSET,
        hidden_layer_size: int = UNSET,
        output_size: int = UNSET,
        genotype: Optional[Sequence[float]] = None,
    ) -> None:
        self.network_class = network_class
        self.network: Optional[BaseNetwork] = None
        self.input_size = input_size
        self.hidden_layer_size = hidden_layer_size
        self.output_size = output_size
        self.genotype: List[float] = list(genotype) if genotype is not None else []

    def begin_play(self) -> None:
        """Build the network and load the genotype into it."""
        if UNSET == self.input_size == self.hidden_layer_size == self.output_size:
            raise ValueError("network sizes were not set up")
        if self.network_class is None:
            return
        network = self.network_class()
        self.network = network
        expected = network.initialize(self.input_size, self.hidden_layer_size, self.output_size)
        if expected != len(self.genotype):
            raise ValueError(
                f"genotype has {len(self.genotype)} genes but the network needs {expected}"
            )
        network.set_weights(self.genotype)

    def tick(self, delta_time: float) -> Optional[List[float]]:
        """Run one step; returns the network outputs, or ``None`` without a network."""
        if self.network is None:
            return None
        inputs = self.feed_inputs()
        if len(inputs) != self.input_size:
            raise ValueError(
                f"fed {len(inputs)} inputs but the input size is {self.input_size}"
            )
        outputs = self.network.process_inputs(inputs)
        self.handle_outputs(outputs)
        return outputs

    def feed_inputs(self) -> List[float]:
        """Return the network inputs for this step."""
        return []

    def handle_outputs(self, outputs: Sequence[float]) -> None:
        """React to the network outputs."""


class TrainController(RuntimeController):
    """Controller used during training; takes its network from a session."""

    def __init__(
        self,
        session: Optional[_Session] = None,
        fitness: float = 0.0,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.session = session
        self.fitness = fitness

    def begin_play(self) -> None:
        if self.session is not None:
            agent = self.session.setup.agent
            self.input_size = agent.neural_inputs
            self.hidden_layer_size = agent.neural_hidden_layer_size
            self.output_size = agent.neural_outputs
            self.network = self.session.network
        super().begin_play()

    def tick(self, delta_time: float) -> Optional[List[float]]:
        if self.network is not None and self.session is not None:
            if self.has_failed_and_should_force_skip():
                self.session.end_current_evaluation()
        return super().tick(delta_time)

    def on_reset_requested(self) -> None:
        """Called before the next individual is evaluated."""

    def compute_fitness(self) -> float:
        """Return the fitness of the current individual."""
        return self.fitness

    def has_failed_and_should_force_skip(self) -> bool:
        """Whether the current individual should be ended early."""
        return False