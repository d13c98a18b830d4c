"""Widget capabilities and the adapters View binds to.

The core never inspects a widget to guess what it is. Callers wrap each
widget in the adapter matching its kind:

    view.add_input("name", TextWidget(name_field))
    view.add_input("agree", CheckboxWidget(agree_box))
    view.add_grouped_clickable("tab", [Clickable(b) for b in tab_buttons])

A target only has to satisfy the matching Protocol below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Protocol, runtime_checkable

ChangeCallback = Callable[[], None]


@runtime_checkable
class TextLike(Protocol):
    def get_value(self) -> str: ...

    def set_value(self, value: str) -> None: ...

    def on_change(self, callback: ChangeCallback) -> None: ...


@runtime_checkable
class CheckboxLike(Protocol):
    def get_checked(self) -> bool: ...

    def set_checked(self, checked: bool) -> None: ...

    def on_change(self, callback: ChangeCallback) -> None: ...


@runtime_checkable
class ClickableLike(Protocol):
    def get_label(self) -> str: ...

    def on_click(self, callback: ChangeCallback) -> None: ...


class BindableWidget(ABC):
    """A widget View can read, write and listen to."""

    @abstractmethod
    def read(self) -> object:
        """Current value shown by the widget."""

    @abstractmethod
    def write(self, value: object) -> None:
        """Show value in the widget."""

    @abstractmethod
    def on_change(self, callback: ChangeCallback) -> None:
        """Call callback whenever the user changes the widget."""


class TextWidget(BindableWidget):
    """Adapter for text-like targets. None is shown as an empty string."""

    __slots__ = ("target",)

    def __init__(self, target: TextLike) -> None:
        self.target = target

    def read(self) -> str:
        return self.target.get_value()

    def write(self, value: object) -> None:
        self.target.set_value("" if value is None else str(value))

    def on_change(self, callback: ChangeCallback) -> None:
        self.target.on_change(callback)

    def __repr__(self) -> str:
        return f"TextWidget({self.target!r})"


class CheckboxWidget(BindableWidget):
    """Adapter for checkbox-like targets."""

    __slots__ = ("target",)

    def __init__(self, target: CheckboxLike) -> None:
        self.target = target

    def read(self) -> bool:
        return self.target.get_checked()

    def write(self, value: object) -> None:
        self.target.set_checked(bool(value))

    def on_change(self, callback: ChangeCallback) -> None:
        self.target.on_change(callback)

    def __repr__(self) -> str:
        return f"CheckboxWidget({self.target!r})"


class Clickable:
    """Adapter for clickable targets; a click reports the target's label."""

    __slots__ = ("target",)

    def __init__(self, target: ClickableLike) -> None:
        self.target = target

    @property
    def label(self) -> str:
        return self.target.get_label()

    def on_click(self, callback: Callable[[str], None]) -> None:
        self.target.on_click(lambda: callback(self.label))

    def __repr__(self) -> str:
        return f"Clickable({self.target!r})"
