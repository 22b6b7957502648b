"""Data loading utilities."""

from .catalog_loader import load_exercises, load_stretches

__all__ = ["load_exercises", "load_stretches"]
