"""ContentSwitcher — one set of keys showing the selected branch of a content map.

Given a model key holding

    {"a": {"title": "A", "text": "ta"}, "b": {"title": "B", "text": "tb"}}

a switcher adds an active-branch key plus one derived key per field. Two
links keep them in sync:

- forward: when the active branch changes, each derived key is set to that
  branch's field value.
- backward: when a derived key changes, the value is written into the active
  branch's field, in place. The content map itself is mutated directly and no
  observer of its own key is notified.

Switching branches runs forward then backward, writing each field back into
the branch it was just read from. That write stores an equal value, so it
notifies nobody and the chain stops there.

All keys are prefixed with a namespace drawn from the model's allocator, so
two switchers, even over the same content key, never share keys.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Iterable

from reactivemv.errors import InconsistentContentsError, InvalidArgumentError, MissingKeyError
from reactivemv.view import View
from reactivemv.widgets import BindableWidget

if TYPE_CHECKING:
    from reactivemv.model import Model
    from reactivemv.widgets import Clickable

logger = logging.getLogger("reactivemv.switcher")


def _field_names(contents_key: str, contents: object) -> tuple[str, ...]:
    """Fields shared by every branch. Raises on malformed or uneven contents."""
    if not isinstance(contents, Mapping) or not contents:
        raise InvalidArgumentError(
            f"{contents_key} must hold a non-empty mapping of branches, got {contents!r}"
        )
    fields: tuple[str, ...] | None = None
    for branch, entry in contents.items():
        if not isinstance(entry, MutableMapping):
            raise InvalidArgumentError(
                f"branch {branch!r} of {contents_key} must be a mutable mapping, got {entry!r}"
            )
        if fields is None:
            fields = tuple(entry)
        elif set(entry) != set(fields):
            raise InconsistentContentsError(
                f"branch {branch!r} of {contents_key} has fields {sorted(entry)}, "
                f"expected {sorted(fields)}"
            )
    return fields


class ContentSwitcher(View):
    """A View over the derived keys of one content map."""

    def __init__(
        self,
        model: Model,
        active_key: str,
        contents: Mapping,
        fields: Iterable[str],
    ) -> None:
        super().__init__(model)
        self.active_key = active_key
        self.fields = tuple(fields)
        self._contents = contents

    @classmethod
    def create(
        cls, view: View, contents_key: str, clickables: Iterable[Clickable]
    ) -> ContentSwitcher:
        """Build the keys and links for contents_key and return the switcher."""
        model = view.model
        contents = model.get(contents_key)
        fields = _field_names(contents_key, contents)

        active_key = f"contentSwitcher-{model.get_next_unique_key()}-{contents_key}-active"
        model.add_key(active_key)
        view.add_grouped_clickable(active_key, clickables)

        switcher = cls(model, active_key, contents, fields)
        for field in fields:
            model.add_key(switcher.key_for(field))
            model.add_observer_handler(active_key, switcher._forward(field))
            model.add_observer_handler(switcher.key_for(field), switcher._backward(field))

        logger.debug(
            "Created content switcher %r over %r with fields %s",
            active_key, contents_key, list(fields),
        )
        return switcher

    def _forward(self, field: str):
        derived = self.key_for(field)

        def copy_from_branch(branch) -> None:
            if branch is None:
                return
            if not self._has_branch(branch):
                logger.warning("%s: no branch %r, %r left unchanged", self.active_key, branch, field)
                return
            self.model.set(derived, self._contents[branch][field])

        return copy_from_branch

    def _backward(self, field: str):
        def write_to_branch(value) -> None:
            branch = self.model.get(self.active_key)
            # nothing selected yet: there is no slot to write into
            if branch is not None and self._has_branch(branch):
                self._contents[branch][field] = value

        return write_to_branch

    def _has_branch(self, branch) -> bool:
        try:
            return branch in self._contents
        except TypeError:
            return False  # unhashable id

    @property
    def active(self) -> object:
        """Id of the selected branch, or None before the first switch."""
        return self.model.get(self.active_key)

    def key_for(self, field: str) -> str:
        """Model key holding field of the active branch."""
        if field not in self.fields:
            raise MissingKeyError(f"{self.active_key}{field}")
        return self.active_key + field

    def add_input(self, field: str, widget: BindableWidget) -> None:
        super().add_input(self.key_for(field), widget)

    def add_output(self, field: str, widget: BindableWidget) -> None:
        super().add_output(self.key_for(field), widget)

    def switch_to(self, branch) -> None:
        if branch is None or not self._has_branch(branch):
            raise InvalidArgumentError(f"no branch {branch!r} in {self.active_key}")
        self.model.set(self.active_key, branch)

    def __repr__(self) -> str:
        return f"ContentSwitcher({self.active_key!r}, active={self.active!r})"
