[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eldertheory"
version = "0.1.0"
description = "Hierarchical Elder, Mentor and Erudite entities with gravitational field, entropy, memory and orbital models and mathematical linters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hierarchical learning",
    "simulation",
    "orbital dynamics",
    "entropy",
    "knowledge transfer",
    "complex analysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eldertheory = "eldertheory.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eldertheory"]

[tool.pytest.ini_options]
addopts = "-ra"
