"""Textual integration for reactivemv. Opt-in — requires textual.

Adapts Textual widgets to the capabilities in reactivemv.widgets. Textual
coupling is isolated in this module; the core stays widget-agnostic.

Input and Checkbox changes are picked up through Textual's reactive
watchers. Button presses arrive as messages on the app, so the app forwards
them:

    class Editor(App):
        def on_mount(self):
            self.tabs = [ButtonTarget(b) for b in self.query(Button)]
            switcher = view.add_content_switcher("pages", buttons(self.tabs))
            switcher.add_input("title", text_input(self.query_one("#title", Input)))

        def on_button_pressed(self, event: Button.Pressed):
            route_pressed(self.tabs, event)
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from textual.css.query import NoMatches, WrongType
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Input

from reactivemv.errors import InvalidArgumentError
from reactivemv.widgets import CheckboxWidget, Clickable, TextWidget

W = TypeVar("W", bound=Widget)


def query_target(app, selector: str, kind: type[W]) -> W:
    """app.query_one() that reports a missing or mistyped widget as InvalidArgumentError."""
    try:
        return app.query_one(selector, kind)
    except (NoMatches, WrongType) as exc:
        raise InvalidArgumentError(f"no {kind.__name__} matching {selector!r}") from exc


class _WatchedTarget:
    """Shared plumbing: one Textual watcher fanning out to change callbacks."""

    def __init__(self, widget) -> None:
        self.widget = widget
        self._callbacks: list[Callable[[], None]] = []
        widget.watch(widget, "value", self._changed, init=False)

    def _changed(self, _value) -> None:
        for callback in list(self._callbacks):
            callback()

    def on_change(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self.widget, 'id', None)!r})"


class InputTarget(_WatchedTarget):
    """TextLike over a Textual Input."""

    widget: Input

    def get_value(self) -> str:
        return self.widget.value

    def set_value(self, value: str) -> None:
        self.widget.value = value


class CheckboxTarget(_WatchedTarget):
    """CheckboxLike over a Textual Checkbox."""

    widget: Checkbox

    def get_checked(self) -> bool:
        return bool(self.widget.value)

    def set_checked(self, checked: bool) -> None:
        self.widget.value = checked


class ButtonTarget:
    """ClickableLike over a Textual Button. Presses are fed in by dispatch()."""

    def __init__(self, button: Button) -> None:
        self.button = button
        self._callbacks: list[Callable[[], None]] = []

    def get_label(self) -> str:
        return str(self.button.label)

    def on_click(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def dispatch(self, event: Button.Pressed) -> bool:
        """Run click callbacks if event was pressed on this button."""
        if event.button is not self.button:
            return False
        for callback in list(self._callbacks):
            callback()
        return True

    def __repr__(self) -> str:
        return f"ButtonTarget({getattr(self.button, 'id', None)!r})"


def route_pressed(targets: Iterable[ButtonTarget], event: Button.Pressed) -> bool:
    """Deliver a Button.Pressed message to the target owning its button."""
    return any(target.dispatch(event) for target in targets)


def text_input(widget: Input) -> TextWidget:
    return TextWidget(InputTarget(widget))


def checkbox(widget: Checkbox) -> CheckboxWidget:
    return CheckboxWidget(CheckboxTarget(widget))


def buttons(targets: Iterable[ButtonTarget]) -> list[Clickable]:
    return [Clickable(target) for target in targets]
