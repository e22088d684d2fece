"""Domain errors raised while preparing scoring inputs."""


class ScoringInputError(Exception):
    """Base class for user-correctable input problems."""
    title = "Invalid Input"


class InputRequiredError(ScoringInputError):
    """A required preference input was left empty."""
    title = "Input Required"
