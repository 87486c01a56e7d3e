class StudyEngineError(Exception):
    """Base class for errors raised by the study engine."""


class InvalidInputError(StudyEngineError, ValueError):
    """Raised when a caller passes input outside an operation's domain."""
