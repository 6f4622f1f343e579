"""Stack and queue abstract data types, with line-oriented input helpers and a demo."""

__version__ = "1.0.0"
__all__ = ["textinput", "stack", "queues", "demo"]