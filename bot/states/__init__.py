"""Bot states."""

from states.chat import ChatStates

__all__ = ["ChatStates"]
