"""Neural networks driven by a flat genotype of weights."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List, Sequence


def _sigmoid(value: float) -> float:
    if value >= 0:
        return 1.0 / (1.0 + math.exp(-value))
    exp = math.exp(value)
    return exp / (1.0 + exp)


class BaseNetwork(ABC):
    """Interface every network used for training must provide."""

    @abstractmethod
    def initialize(self, inputs: int, hidden: int, outputs: int) -> int:
        """Size the network and return the genotype length it needs."""

    @abstractmethod
    def set_weights(self, genotype: Sequence[float]) -> None:
        """Load the weights from a genotype."""

    @abstractmethod
    def process_inputs(self, inputs: Sequence[float]) -> List[float]:
        """Feed inputs through the network and return its outputs."""


def _layer(inputs: Sequence[float], weights: Sequence[float], size: int) -> List[float]:
    width = len(inputs) + 1
    outputs = []
    for start in range(0, size * width, width):
        row = weights[start:start + width]
        total = sum(x * w for x, w in zip(inputs, row[:-1])) - row[-1]
        outputs.append(_sigmoid(total))
    return outputs


class TwoLayerFeedForward(BaseNetwork):
    """Feed-forward network with one sigmoid hidden layer and sigmoid outputs.

    Each neuron owns its input weights followed by a bias, which is
    subtracted from the weighted sum.
    """

    def __init__(self) -> None:
        self.input_layer_size = 0
        self.hidden_layer_size = 0
        self.output_layer_size = 0
        self.weights_one: List[float] = []
        self.weights_two: List[float] = []
        self.hidden_outputs: List[float] = []
        self.output_outputs: List[float] = []

    @property
    def genotype_size(self) -> int:
        return len(self.weights_one) + len(self.weights_two)

    def initialize(self, inputs: int, hidden: int, outputs: int) -> int:
        self.input_layer_size = inputs
        self.hidden_layer_size = hidden
        self.output_layer_size = outputs
        self.weights_one = [0.0] * ((inputs + 1) * hidden)
        self.weights_two = [0.0] * ((hidden + 1) * outputs)
        self.hidden_outputs = [0.0] * hidden
        self.output_outputs = [0.0] * outputs
        return self.genotype_size

    def set_weights(self, genotype: Sequence[float]) -> None:
        if len(genotype) != self.genotype_size:
            raise ValueError(
                f"invalid genotype size: expected {self.genotype_size} but got {len(genotype)}"
            )
        split = len(self.weights_one)
        self.weights_one = [float(gene) for gene in genotype[:split]]
        self.weights_two = [float(gene) for gene in genotype[split:]]

    def process_inputs(self, inputs: Sequence[float]) -> List[float]:
        return self.forward_propagation(inputs)

    def forward_propagation(self, inputs: Sequence[float]) -> List[float]:
        """Compute the outputs for ``inputs``."""
        if len(inputs) != self.input_layer_size:
            raise ValueError(
                f"input size mismatch: expected {self.input_layer_size} but got {len(inputs)}"
            )
        self.hidden_outputs = _layer(inputs, self.weights_one, self.hidden_layer_size)
        self.output_outputs = _layer(self.hidden_outputs, self.weights_two, self.output_layer_size)
        return list(self.output_outputs)