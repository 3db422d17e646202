"""Shared test fixtures for elmerlint."""

from __future__ import annotations

from pathlib import Path

import pytest

from elmerlint.parser.dictionary import KeywordDictionary, load_dictionary
from elmerlint.parser.validator import SifValidator
from elmerlint.service.validation_service import ValidationService

FIXTURES_DIR = Path(__file__).parent / "fixtures"
KEYWORDS_YAML = FIXTURES_DIR / "keywords.yaml"
HEAT_SIF = FIXTURES_DIR / "heat.sif"

SAMPLE_KEYWORDS = {
    "simulation": {"max output level": True, "simulation type": True},
    "solver": {"equation": True, "procedure": True, "linear system solver": True},
    "material": {"density": True, "heat conductivity": True},
    "bc": {"target boundaries": True, "temperature": True, "mask name 1": True},
    "bodyforce": {"heat source": True},
}


SAMPLE_SIF = """\
Header
  Mesh DB "." "mesh"
End

Simulation
  Max Output Level = 5
  Simulation Type = Steady State
  Foo Bar = 1
End

Solver 1
  Equation = Heat Equation
  Procedure = "HeatSolver" "HeatSolver"
End

Material 1
  Name = "Steel"
  Density = 7800
End

Boundary Condition 1
  Target Boundaries(2) = 1 2
  Mask Name 3 = 1
End
"""


@pytest.fixture
def dictionary() -> KeywordDictionary:
    return KeywordDictionary.from_mapping(SAMPLE_KEYWORDS)


@pytest.fixture
def validator(dictionary: KeywordDictionary) -> SifValidator:
    return SifValidator(dictionary)


@pytest.fixture
def service(dictionary: KeywordDictionary) -> ValidationService:
    return ValidationService(dictionary)


@pytest.fixture
def yaml_dictionary() -> KeywordDictionary:
    return load_dictionary(KEYWORDS_YAML)
