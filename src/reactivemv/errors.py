"""Error kinds raised by reactivemv.

Every error is raised synchronously, before any state has changed.
"""


class ReactiveMVError(Exception):
    """Base class for all reactivemv errors."""


class MissingKeyError(ReactiveMVError, KeyError):
    """A key was read, written or observed before Model.add_key()."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key [{self.key}] missing in model, call Model.add_key()"


class DuplicateKeyError(ReactiveMVError, KeyError):
    """Model.add_key() was called twice with the same name."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"{self.key} already in model"


class InvalidArgumentError(ReactiveMVError, TypeError):
    """An argument has the wrong kind or shape."""


class InconsistentContentsError(InvalidArgumentError):
    """Branches of a content map do not share the same field set."""
