# exceptions.py


class CancelAction(Exception):
    """User typed 'cancel' at a prompt; unwind to the main menu."""


class GoBackAction(Exception):
    """User typed 'back' at a prompt; unwind one menu level."""


class InputValidationError(ValueError):
    """Raised when console or GUI input cannot be turned into dates or counts."""


class RosterFileError(Exception):
    """Raised when a roster file is missing, unreadable or has no employees."""
