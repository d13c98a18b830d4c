"""reactivemv: observable key-value model with two-way widget bindings."""

from importlib.metadata import version as _version

__version__ = _version("reactivemv")

from reactivemv.errors import (
    ReactiveMVError,
    MissingKeyError,
    DuplicateKeyError,
    InvalidArgumentError,
    InconsistentContentsError,
)
from reactivemv.observable import Observable, Observer
from reactivemv.model import Model, NamespaceAllocator, default_allocator
from reactivemv.widgets import BindableWidget, TextWidget, CheckboxWidget, Clickable
from reactivemv.view import View
from reactivemv.switcher import ContentSwitcher
# textual NOT auto-imported — opt-in only

__all__ = [
    "Observable",
    "Observer",
    "Model",
    "NamespaceAllocator",
    "default_allocator",
    "View",
    "ContentSwitcher",
    "BindableWidget",
    "TextWidget",
    "CheckboxWidget",
    "Clickable",
    "ReactiveMVError",
    "MissingKeyError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "InconsistentContentsError",
]
