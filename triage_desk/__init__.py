"""Console desk for registering patients and serving them by priority."""

__version__ = "0.1.0"
__all__ = ["cli", "extra", "linked_list", "triage"]