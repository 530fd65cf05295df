"""Command line interface for the challenge planner."""
