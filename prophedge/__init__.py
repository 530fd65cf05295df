"""Prop firm challenge planner with broker hedge sizing and Monte Carlo estimates."""

__version__ = "0.1.0"
