from __future__ import annotations

class NotBindableError(TypeError):
    """Value does not belong to any registered container kind."""

    value: object

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"No container kind accepts {type(value).__name__}: {value!r}")

class KindMismatchError(TypeError):
    """Container of one kind was used where another kind was expected."""

    kind: str
    got: object

    def __init__(self, kind: str, got: object) -> None:
        self.kind = kind
        self.got = got
        super().__init__(f"Expected a {kind} container, got {type(got).__name__}: {got!r}")

__all__ = ("KindMismatchError", "NotBindableError")
