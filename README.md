# neuroforge

Train small neural-network agents with a genetic algorithm, and pick
actions with a utility-AI brain. Pure Python, no dependencies.

## What is inside

- `neuroforge.types`: session configuration dataclasses (`SessionSetup`,
  `PopulationSetup`, `AgentSetup`, `GymSetup`) and the `SessionOverride`
  flags, with `has_active_flag` and `activate_flag`. A fresh
  `PopulationSetup` has 20 individuals, 30 seconds per individual, a
  mutation chance of 0.05 and a recombination chance of 0.8.
- `neuroforge.network`: the abstract `BaseNetwork` and
  `TwoLayerFeedForward`, a network with one sigmoid hidden layer and
  sigmoid outputs. Each neuron's bias is subtracted from its weighted sum.
  `initialize(inputs, hidden, outputs)` returns how many weights a
  genotype has to supply; `set_weights` and `forward_propagation` raise
  `ValueError` on a size mismatch.
- `neuroforge.individual`: `Individual`, a genotype with a fitness.
  `Individual.random` draws genes from [-4, 4], `Individual.from_genotype`
  takes a given genotype (optionally mutating it), `recombine` copies a
  segment of another individual's genotype (two-point crossover) and
  `mutate` shifts genes by a value in [-0.5, 0.5].
- `neuroforge.controller`: `RuntimeController`, which runs a trained
  genotype (override `feed_inputs` and `handle_outputs`), and
  `TrainController`, which an agent subclasses during training to report
  `compute_fitness` and, through `has_failed_and_should_force_skip`, to
  end an individual early.
- `neuroforge.session`: `TrainingSession`. Each call to `heartbeat()`
  advances the clock by one second; every individual runs until it hits
  `max_time_per_individual` or is ended early. When the whole population
  has run, the next generation is built by binary tournament selection,
  crossover, mutation, and carrying over the best individual.
- `neuroforge.persistence`: writes sessions as plain `key=value` text
  files and reads them back (`render_session_file`, `save_session_data`,
  `save_best_genotype`, `save_current_genotype`, `load_session_data`,
  `import_genotype`).
- `neuroforge.genotype`: the compact text form of a genotype
  (`compress_genotype`, `decompress_genotype`), the `key=value` line
  parser `parse_key_values`, and `format_genotype`, which renders
  `(g1,g2,...)`.
- `neuroforge.utility_ai`: `Consideration`, `Action` and `Brain`.
  `Brain.score_action` multiplies the consideration scores, compensating
  for their number; `Brain.choose_action` and `Brain.think` keep the
  highest-scoring action as `best_action`.

## Installing

```
pip install .
```

## A short example

```python
from neuroforge.network import TwoLayerFeedForward
from neuroforge.genotype import compress_genotype, decompress_genotype

net = TwoLayerFeedForward()
size = net.initialize(2, 3, 1)       # (2 + 1) * 3 + (3 + 1) * 1 = 13 weights
net.set_weights([0.5] * size)
print(net.process_inputs([1.0, 0.0]))

text = compress_genotype([0.5, -1.25])   # "5000|-12500"
print(decompress_genotype(text))
```

## Training

```python
from neuroforge.controller import TrainController
from neuroforge.network import TwoLayerFeedForward
from neuroforge.session import TrainingSession
from neuroforge.persistence import save_best_genotype

class Agent(TrainController):
    def compute_fitness(self):
        return self.fitness   # update this from your simulation

session = TrainingSession(random_seed=7, network=TwoLayerFeedForward())
session.set_network_structure(2, 3, 1)
session.start(Agent())

for _ in range(1000):
    session.heartbeat()

session.stop()
save_best_genotype(session, "sessions")   # raises ValueError if nothing scored above 0
```

`load_session_data(session, path)` restores the settings and population
from a saved file; a `Controller` or `NeuralNetwork` entry is only used
when it names the factory already configured in the session's setup.

## What it does not do

The package has no simulation, world or agent spawning of its own: your
code supplies the agent through a `TrainController` subclass and calls
`heartbeat()` itself, as no timer runs in the background. There is no
control panel, file dialog, clipboard access or command-line program;
saving and loading take explicit directories and paths.

## Running the tests

```
pip install .[test]
pytest
```