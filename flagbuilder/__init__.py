"""Constitutional flag builder: step-by-step construction geometry."""

__version__ = "0.1.0"
