"""Planner configuration."""

from prophedge.config.parameters import (
    DEFAULT_CONFIGURATION,
    PlannerConfiguration,
    flat_field_name,
    load_configuration,
    load_configuration_file,
)

__all__ = [
    "DEFAULT_CONFIGURATION",
    "PlannerConfiguration",
    "flat_field_name",
    "load_configuration",
    "load_configuration_file",
]
