"""Utility helpers shared across the project.

Submodules:
    logging – structured logging setup and execution-time decorator.
"""
