"""Tests for style options and the options form."""

import logging

from nested_details.options import (
    GroupingLevel,
    NestedDetailsOptions,
    build_options_form,
    define_options,
)


def test_define_options_defaults():
    options = define_options()

    assert options.collapsed is False
    assert options.open_first is True
    assert options.title == ""
    assert options.description == ""
    assert options.override is True
    assert options.grouping == []


def test_grouping_level_lookup():
    options = NestedDetailsOptions(grouping=[GroupingLevel(field="type")])

    assert options.grouping_level(0).field == "type"
    assert options.grouping_level(1) is None
    assert options.grouping_level(-1) is None


def test_form_elements_in_weight_order():
    form = build_options_form()

    assert [e.name for e in form] == ["collapsed", "open_first", "title", "description"]
    assert [e.weight for e in form] == [-49, -48, -47, -46]


def test_form_uses_current_option_values():
    options = NestedDetailsOptions(collapsed=True, open_first=False, title="name")

    form = {e.name: e for e in build_options_form(options, {"name": "Name"})}

    assert form["collapsed"].default_value is True
    assert form["open_first"].default_value is False
    assert form["title"].default_value == "name"
    assert form["description"].default_value == ""


def test_open_first_hidden_while_not_collapsed():
    form = {e.name: e for e in build_options_form()}

    assert form["open_first"].states == {
        "invisible": {
            ':input[name="style_options[collapsed]"]': {"checked": False},
        },
    }
    assert form["collapsed"].states == {}


def test_select_choices_start_with_none():
    labels = {"title": "Title", "body": "Body"}

    form = {e.name: e for e in build_options_form(field_labels=labels)}

    for name in ("title", "description"):
        assert form[name].type == "select"
        assert list(form[name].options.items()) == [
            ("", "- None -"),
            ("title", "Title"),
            ("body", "Body"),
        ]


def test_unknown_field_reference_is_logged(caplog):
    options = NestedDetailsOptions(title="removed_field")

    with caplog.at_level(logging.WARNING):
        build_options_form(options, {"title": "Title"})

    assert "removed_field" in caplog.text


def test_field_labelled_empty_does_not_replace_none_choice():
    form = {e.name: e for e in build_options_form(field_labels={"": "Oops", "a": "A"})}

    assert form["title"].options == {"": "- None -", "a": "A"}
