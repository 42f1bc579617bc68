"""Errors raised by the convention and emission engines."""


class JsonMirrorError(ValueError):
    """Base class for all json_mirror errors."""


class InvalidInput(JsonMirrorError):
    """The text or object to convert was absent."""


class EmptyResult(JsonMirrorError):
    """Nothing convertible was left after stripping punctuation."""
