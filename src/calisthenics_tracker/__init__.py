"""calisthenics-tracker: rotating calisthenics workout generator and log."""

__version__ = "0.1.0"
