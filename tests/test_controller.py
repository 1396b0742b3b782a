import pytest

from neuroforge.controller import RuntimeController, TrainController
from neuroforge.network import TwoLayerFeedForward
from neuroforge.types import AgentSetup, SessionSetup


class EchoController(RuntimeController):
    def __init__(self, inputs, **kwargs):
        super().__init__(**kwargs)
        self.inputs = inputs
        self.received = []

    def feed_inputs(self):
        return list(self.inputs)

    def handle_outputs(self, outputs):
        self.received.append(list(outputs))


class FakeSession:
    def __init__(self, setup, network):
        self.setup = setup
        self.network = network
        self.ended = 0

    def end_current_evaluation(self):
        self.ended += 1


class SkippingController(TrainController):
    def feed_inputs(self):
        return [0.3]

    def has_failed_and_should_force_skip(self):
        return True


def test_begin_play_without_sizes_raises():
    controller = RuntimeController(network_class=TwoLayerFeedForward)
    with pytest.raises(ValueError):
        controller.begin_play()


def test_begin_play_genotype_mismatch_raises():
    controller = RuntimeController(
        network_class=TwoLayerFeedForward,
        input_size=2, hidden_layer_size=2, output_size=1, genotype=[0.0] * 3,
    )
    with pytest.raises(ValueError):
        controller.begin_play()


def test_tick_with_zero_weights_outputs_half():
    reference = TwoLayerFeedForward()
    reference.initialize(2, 2, 1)
    reference.set_weights([0.0] * 9)
    assert reference.process_inputs([1.0, -1.0]) == [0.5]

    controller = EchoController(
        [1.0, -1.0],
        network_class=TwoLayerFeedForward,
        input_size=2, hidden_layer_size=2, output_size=1, genotype=[0.0] * 9,
    )
    controller.begin_play()
    outputs = controller.tick(0.1)
    assert outputs == [0.5]
    assert controller.received == [[0.5]]


def test_tick_matches_network_result():
    genotype = [0.2, -0.4, 0.1, 0.7, 0.3, -0.2, 0.5, -0.6, 0.05]
    controller = EchoController(
        [0.9, 0.1],
        network_class=TwoLayerFeedForward,
        input_size=2, hidden_layer_size=2, output_size=1, genotype=genotype,
    )
    controller.begin_play()
    reference = TwoLayerFeedForward()
    reference.initialize(2, 2, 1)
    reference.set_weights(genotype)
    assert controller.tick(0.1) == reference.process_inputs([0.9, 0.1])


def test_tick_without_network_does_nothing():
    controller = RuntimeController(input_size=1, hidden_layer_size=1, output_size=1)
    controller.begin_play()
    assert controller.tick(0.1) is None
    assert controller.feed_inputs() == []


def test_tick_with_wrong_input_count_raises():
    controller = RuntimeController(
        network_class=TwoLayerFeedForward,
        input_size=2, hidden_layer_size=1, output_size=1, genotype=[0.0] * 5,
    )
    controller.begin_play()
    with pytest.raises(ValueError):
        controller.tick(0.1)


def test_train_controller_takes_structure_from_session():
    network = TwoLayerFeedForward()
    network.initialize(3, 4, 2)
    setup = SessionSetup(agent=AgentSetup(neural_inputs=3, neural_hidden_layer_size=4, neural_outputs=2))
    controller = TrainController(session=FakeSession(setup, network))
    controller.begin_play()
    assert (controller.input_size, controller.hidden_layer_size, controller.output_size) == (3, 4, 2)
    assert controller.network is network


def test_train_controller_fitness_and_defaults():
    controller = TrainController(fitness=2.5)
    assert controller.compute_fitness() == 2.5
    assert controller.has_failed_and_should_force_skip() is False


def test_train_controller_force_skip_ends_evaluation():
    network = TwoLayerFeedForward()
    network.initialize(1, 1, 1)
    setup = SessionSetup()
    session = FakeSession(setup, network)
    controller = SkippingController(session=session)
    controller.begin_play()
    outputs = controller.tick(0.1)
    assert session.ended == 1
    assert outputs == [0.5]


def test_train_controller_without_session_skips_nothing():
    controller = TrainController(input_size=1, hidden_layer_size=1, output_size=1)
    controller.begin_play()
    assert controller.tick(0.1) is None
    assert controller.has_failed_and_should_force_skip() is False