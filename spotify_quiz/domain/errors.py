"""Quiz error taxonomy."""


class QuizError(Exception):
    """Base class for every failure the quiz surfaces to the user."""


class DataLoadError(QuizError):
    """Top items or question templates could not be fetched."""


class InvalidTemplateError(DataLoadError):
    """A question template entry is malformed."""


class InsufficientItemsError(QuizError):
    """A top-items list is too short to form the choices of a question."""


class TemplatePoolExhaustedError(QuizError):
    """Not enough distinct templates to fill a quiz."""


class QuizStateError(QuizError):
    """Operation not allowed in the current quiz or cache state."""


class AlreadyAnsweredError(QuizStateError):
    """The current question already received an answer."""
