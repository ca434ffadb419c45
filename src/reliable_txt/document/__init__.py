"""Document layer for ReliableTXT processing."""

from .document import ReliableTxtDocument

__all__ = ["ReliableTxtDocument"]
