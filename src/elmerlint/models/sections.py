"""Section identifiers of the Elmer solver input format."""

from __future__ import annotations

from enum import StrEnum


class Section(StrEnum):
    HEADER = "header"
    SIMULATION = "simulation"
    CONSTANTS = "constants"
    EQUATION = "equation"
    SOLVER = "solver"
    MATERIAL = "material"
    BODY = "body"
    BODY_FORCE = "bodyforce"
    BOUNDARY_CONDITION = "bc"
    INITIAL_CONDITION = "ic"
    COMPONENT = "component"
    BOUNDARY = "boundary"


# Header spelling (lower-cased, whitespace collapsed) -> section identifier.
SECTION_NAMES: dict[str, Section] = {
    "header": Section.HEADER,
    "simulation": Section.SIMULATION,
    "constants": Section.CONSTANTS,
    "equation": Section.EQUATION,
    "solver": Section.SOLVER,
    "material": Section.MATERIAL,
    "body": Section.BODY,
    "body force": Section.BODY_FORCE,
    "boundary condition": Section.BOUNDARY_CONDITION,
    "initial condition": Section.INITIAL_CONDITION,
    "component": Section.COMPONENT,
    "boundary": Section.BOUNDARY,
}
