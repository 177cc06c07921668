"""The capability an object needs to have its state managed."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Stateful(Protocol):
    """Anything exposing a readable and settable current state."""

    def state(self) -> Any:
        ...

    def set_state(self, state: Any) -> None:
        ...


class AttributeStateful:
    """Adapts an object that keeps its state in a plain attribute."""

    def __init__(self, target: Any, attribute: str = "state") -> None:
        self.target = target
        self.attribute = attribute

    def state(self) -> Any:
        return getattr(self.target, self.attribute)

    def set_state(self, state: Any) -> None:
        setattr(self.target, self.attribute, state)

    def __repr__(self) -> str:
        return f"AttributeStateful({type(self.target).__name__}.{self.attribute})"
