"""Adapters that load project data from outside the process."""
