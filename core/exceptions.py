"""
Application exceptions.

Only "no such note" is classified here; every other failure is the
driver's own exception and propagates untouched.
"""


class NoteNotFoundError(Exception):
    """Raised when a note id is malformed or no document matches it."""

    def __init__(self, note_id=None, message: str = "note not found"):
        self.note_id = note_id
        self.message = message
        super().__init__(message)
