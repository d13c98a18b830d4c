"""Tests for View bindings."""

import pytest

from fakes import FakeButton, FakeCheckbox, FakeTextField
from reactivemv import (
    CheckboxWidget,
    Clickable,
    InvalidArgumentError,
    MissingKeyError,
    Model,
    TextWidget,
    View,
)


@pytest.fixture
def model():
    m = Model()
    m.add_key("name", "from model")
    return m


class TestConstruction:
    def test_rejects_non_model(self):
        with pytest.raises(InvalidArgumentError, match="must be an instance of Model"):
            View({"name": 1})


class TestAddInput:
    def test_widget_seeds_model(self, model):
        field = FakeTextField("from widget")
        View(model).add_input("name", TextWidget(field))
        assert model.get("name") == "from widget"
        assert field.value == "from widget"

    def test_widget_edits_reach_model(self, model):
        field = FakeTextField("a")
        View(model).add_input("name", TextWidget(field))
        log = []
        model.add_observer_handler("name", log.append)
        field.type("ab")
        assert model.get("name") == "ab"
        assert log == ["ab"]

    def test_model_changes_reach_widget(self, model):
        field = FakeTextField("a")
        View(model).add_input("name", TextWidget(field))
        model.set("name", "b")
        assert field.value == "b"

    def test_two_inputs_on_one_key_stay_in_sync(self, model):
        first, second = FakeTextField("one"), FakeTextField("two")
        view = View(model)
        view.add_input("name", TextWidget(first))
        view.add_input("name", TextWidget(second))
        # last bound widget wins at bind time
        assert model.get("name") == "two"
        assert first.value == "two"
        second.type("typed")
        assert first.value == "typed"

    def test_checkbox(self):
        m = Model()
        m.add_key("agree", False)
        box = FakeCheckbox(True)
        View(m).add_input("agree", CheckboxWidget(box))
        assert m.get("agree") is True
        box.toggle()
        assert m.get("agree") is False
        m.set("agree", True)
        assert box.checked is True

    def test_missing_key(self):
        with pytest.raises(MissingKeyError):
            View(Model()).add_input("nope", TextWidget(FakeTextField()))


class TestAddOutput:
    def test_shows_current_then_changes(self, model):
        label = FakeTextField()
        View(model).add_output("name", TextWidget(label))
        assert label.value == "from model"
        model.set("name", "next")
        assert label.writes == ["from model", "next"]

    def test_output_follows_input(self, model):
        field, label = FakeTextField("typed"), FakeTextField()
        view = View(model)
        view.add_input("name", TextWidget(field))
        view.add_output("name", TextWidget(label))
        field.type("again")
        assert label.value == "again"

    def test_missing_key(self):
        with pytest.raises(MissingKeyError):
            View(Model()).add_output("nope", TextWidget(FakeTextField()))


class TestGroupedClickable:
    def test_click_sets_label(self):
        m = Model()
        m.add_key("tab")
        buttons = [FakeButton("a"), FakeButton("b")]
        View(m).add_grouped_clickable("tab", [Clickable(b) for b in buttons])
        buttons[1].click()
        assert m.get("tab") == "b"
        buttons[0].click()
        assert m.get("tab") == "a"

    def test_reclick_after_external_change(self):
        m = Model()
        m.add_key("tab")
        a, b = FakeButton("a"), FakeButton("b")
        View(m).add_grouped_clickable("tab", [Clickable(a), Clickable(b)])
        a.click()
        m.set("tab", "b")
        a.click()
        assert m.get("tab") == "a"

    def test_missing_key(self):
        with pytest.raises(MissingKeyError):
            View(Model()).add_grouped_clickable("nope", [Clickable(FakeButton("a"))])
