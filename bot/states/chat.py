"""
Chat FSM States

States for the race coach chat.
"""

from aiogram.fsm.state import State, StatesGroup


class ChatStates(StatesGroup):
    """FSM states for the race coach chat."""

    # Session open, free text is forwarded to the backend
    chatting = State()

    # Three off-topic strikes: nothing is forwarded any more
    blocked = State()
