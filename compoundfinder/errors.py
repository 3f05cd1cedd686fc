"""Exceptions raised by compoundfinder."""


class CompoundFinderError(Exception):
    """Base class for all compoundfinder errors."""


class InvalidTargetError(CompoundFinderError, ValueError):
    """Target length has no matching words in the vocabulary."""

    def __init__(self, target: int, message: str | None = None):
        self.target = target
        super().__init__(
            message
            or f"Invalid target length specified, length {target} not found in input"
        )


class MalformedInputError(CompoundFinderError):
    """Vocabulary source could not be read as text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed input {path}: {reason}")
