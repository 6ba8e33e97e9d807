# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for resolving property dumps from the command line.

Usage:
    python -m index_properties.runner < input.json > output.json

Exports:
    Executor: Resolves runner input through the catalogue
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import Executor
from .schema import RunnerInput, RunnerOutput

__all__ = [
    "Executor",
    "RunnerInput",
    "RunnerOutput",
]
