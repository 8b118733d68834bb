"""Chat errors."""


class ChatError(Exception):
    """Base chat error."""
    pass


class ChatRelayError(ChatError):
    """The model could not be reached or returned nothing usable."""
    pass


class ChatBlockedError(ChatError):
    """Session is locked after too many off-topic questions."""
    pass


class ChatBusyError(ChatError):
    """A message is already waiting for a reply in this session."""
    pass
