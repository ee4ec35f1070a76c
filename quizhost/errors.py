# errors.py
class QuizHostError(Exception):
    pass

class ValidationError(QuizHostError):
    """Malformed or missing input. Never retried."""

class Unauthorized(QuizHostError):
    pass

class Conflict(QuizHostError):
    """A quiz with the same id already exists."""

class NotFound(QuizHostError):
    pass

class StoreError(QuizHostError):
    """The underlying database failed (IO, locking, connection)."""
