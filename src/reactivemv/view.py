"""View — binds widgets to Model keys.

Bindings are Observer links in both directions:

    widget event -> widget observable -> Model.set -> key observers -> widget

Each direction stops as soon as a value equals the state it would replace,
so a two-way binding settles after one round trip.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from reactivemv.errors import InvalidArgumentError
from reactivemv.model import Model
from reactivemv.observable import Observable
from reactivemv.widgets import BindableWidget, Clickable

if TYPE_CHECKING:
    from reactivemv.switcher import ContentSwitcher

logger = logging.getLogger("reactivemv.view")


class _WidgetObservable(Observable):
    """Observable mirroring a widget: user edits set it, set_state shows it."""

    __slots__ = ("_widget",)

    def __init__(self, widget: BindableWidget) -> None:
        super().__init__()
        self._widget = widget
        self._state = widget.read()
        widget.on_change(lambda: self.set_state(widget.read()))

    def set_state(self, value) -> None:
        super().set_state(value)
        self._widget.write(value)


class View:
    """Wires widgets to the keys of a Model."""

    def __init__(self, model: Model) -> None:
        if not isinstance(model, Model):
            raise InvalidArgumentError("model must be an instance of Model")
        self.model = model

    def add_input(self, key: str, widget: BindableWidget) -> None:
        """Two-way binding. The widget's current value becomes the key's value."""
        self.model.get(key)  # fail before touching the widget
        source = _WidgetObservable(widget)
        source.subscribe(lambda value: self.model.set(key, value))
        self.model.set(key, source.get_state())
        self.model.add_observer_handler(key, source.set_state)
        logger.debug("Bound input %r to %r", widget, key)

    def add_output(self, key: str, widget: BindableWidget) -> None:
        """One-way binding from key to widget."""
        widget.write(self.model.get(key))
        self.model.add_observer_handler(key, widget.write)
        logger.debug("Bound output %r to %r", widget, key)

    def add_grouped_clickable(self, key: str, clickables: Iterable[Clickable]) -> None:
        """Clicking any of clickables sets key to that clickable's label."""
        self.model.get(key)  # fail before wiring anything
        for clickable in clickables:
            clickable.on_click(lambda label: self.model.set(key, label))

    def add_content_switcher(
        self, contents_key: str, clickables: Iterable[Clickable]
    ) -> ContentSwitcher:
        """Derive one key per field of the branch selected by clickables.

        contents_key must hold a mapping of branch id -> field mapping, every
        branch having the same fields. See ContentSwitcher.
        """
        from reactivemv.switcher import ContentSwitcher

        return ContentSwitcher.create(self, contents_key, clickables)
