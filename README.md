# eldertheory

A hierarchical system of three kinds of entity. Elders hold universal
principles and generate gravitational fields, Mentors keep domain
knowledge and transfer it between domains, and Erudites learn specific
tasks. The package also has entropy and information-flow models,
field-based memory, orbital dynamics, a training loop with convergence
analysis, and linters that check hierarchies and mathematical structures.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`.

## Command line

```
eldertheory            # print a short banner
eldertheory simulate   # report the stages of a simulation run
eldertheory train      # report the stages of hierarchical training
eldertheory analyze    # report the stages of a system analysis
```

Each command prints a line saying it is starting, followed by its
stages, one per line. The same stages are available from Python through
`eldertheory.cli.run_simulation()`, `run_training()` and `run_analysis()`,
which print them and return them as a list of strings.

## Library use

```python
from eldertheory.elder.entities import GravitationalGenerator, Vector3D
from eldertheory.erudite.learning import SampleComplexityAnalyzer
from eldertheory.helio.entropy import ChannelCapacity

grav = GravitationalGenerator().generate_field(4.0, Vector3D(1.0, 0.0, 0.0))
print(grav.range, grav.stability)  # 20.0 2.0

analyzer = SampleComplexityAnalyzer()
print(analyzer.optimize_sample_allocation(10, 3))  # [4, 3, 3]

channels = ChannelCapacity(bandwidth=1.0, signal_power=3.0, noise_level=1.0)
print(channels.calculate_shannon_capacity())  # 2.0
```

## Modules

- `eldertheory.elder.entities`: `Vector3D`, `Elder`, `Principle`,
  `GravitationalField`, `GravitationalGenerator`, `UniversalPrincipleManager`,
  `MentorCoordinator`
- `eldertheory.elder.controllers`: `InformationCapacityController`,
  `OrbitalStabilityController`, `ParameterSpaceManager`, `ResonanceController`
- `eldertheory.erudite.core`: `EruditeEntity`, `EruditeLearningAlgorithm`,
  `ResonanceResponseMechanism`, `SpecializationManager`
- `eldertheory.erudite.learning`: `EruditeLossFunction`, `PACLearningBounds`,
  `SampleComplexityAnalyzer`
- `eldertheory.erudite.tasks`: audio, language and vision erudites such as
  `AudioEventDetectionErudite`, `LanguageGenerationErudite` and
  `SceneUnderstandingErudite`
- `eldertheory.mentor.core`: `MentorEntity`, `MentorStatus`,
  `DomainKnowledgeManager`, `EruditeOrchestrator`, `OrbitalMechanics`
- `eldertheory.mentor.learning`: `ConvergenceAnalyzer`, `MentorLossFunction`,
  `MentorOptimizer`
- `eldertheory.mentor.transfer`: `DomainMappingProtocol`, `IsomorphismDetector`,
  `KnowledgeTransferEngine`, `UniversalPrincipleExtractor`
- `eldertheory.mentor.domains`: `AudioMentor`, `LanguageMentor`,
  `MultimodalMentor`, `VisionMentor`
- `eldertheory.helio.architecture`: `HierarchicalMapping`, `IsomorphismChain`,
  `SystemClosure`, `UnifiedFramework`
- `eldertheory.helio.coordination`: `HierarchyController`,
  `InformationFlowManager`, `PhaseSynchronizer`, `ResonanceCoupler`
- `eldertheory.helio.entropy`: `ChannelCapacity`, `EntropyDistribution`,
  `EntropyDynamics`, `InformationGradient`
- `eldertheory.helio.memory`: `ElderMemoryMap`, `FieldBasedMemory`,
  `GravitationalMemory`, `InfiniteMemory`
- `eldertheory.simulation.dynamics`: `OrbitalDynamics` (Newtonian n-body
  forces) and `SimulationCore` (a clock that sleeps for each time step in
  real time until it reaches `max_time` or is stopped)
- `eldertheory.simulation.training`: `ElderTrainingLoop`, `ConvergenceAnalyzer`,
  `ConvergenceReport`
- `eldertheory.linters.hierarchy`: `EntityRelationshipLinter`
- `eldertheory.linters.complex_analysis`: `ComplexAnalysisLinter`,
  `HeliomorphicValidator`
- `eldertheory.linters.structures`: `ElderSpaceValidator`,
  `IsomorphismChecker`, `TopologyValidator`

## What the package does not do

- The command-line commands only print their stages; they do not build or
  run any of the models above.
- There are no gradient optimisers (SGD, momentum, Adam, RMSprop) and no
  hierarchical backpropagation. `ElderTrainingLoop` predicts each input
  unchanged and measures loss and accuracy, but never updates the model's
  parameters.
- Nothing is saved to disk; all state lives in memory.