from __future__ import annotations

from widgetkit.api.dropdown import OptionRecord, SelectionMode


def test_closed_view_has_placeholder_and_collapsed_semantics(make_dropdown) -> None:
    dropdown = make_dropdown(options=(OptionRecord(label="A", value=1),), widget_id="fruit")
    view = dropdown.view()
    assert not view.is_open
    assert view.visible_options == ()
    assert not view.is_empty
    assert view.display_label == "Select..."
    assert view.is_placeholder
    assert not view.has_selection
    assert view.active_descendant is None
    assert view.semantics.trigger == {
        "aria-haspopup": "listbox",
        "aria-expanded": "false",
        "aria-controls": "fruit-listbox",
    }
    assert view.semantics.listbox["aria-multiselectable"] == "false"


def test_open_view_projects_options_focus_and_ids(make_dropdown) -> None:
    dropdown = make_dropdown(
        options=(
            OptionRecord(label="A", value="a", disabled=True, decoration="icon-a"),
            OptionRecord(label="B", value="b"),
        ),
        value="b",
        widget_id="dd",
        label="Letter",
    )
    dropdown.on_trigger_activate()
    view = dropdown.view()
    assert view.is_open
    assert view.semantics.trigger["aria-expanded"] == "true"
    assert [o.option_id for o in view.visible_options] == ["dd-option-0", "dd-option-1"]
    first, second = view.visible_options
    assert first.disabled and not first.selected and first.decoration == "icon-a"
    assert second.selected and second.focused
    assert view.focus_index == 1
    assert view.active_descendant == "dd-option-1"
    assert view.display_label == "B"
    assert view.label == "Letter"
    assert not view.is_placeholder


def test_multiple_view_has_chips_in_insertion_order(make_dropdown) -> None:
    dropdown = make_dropdown(
        options=(
            OptionRecord(label="One", value=1),
            OptionRecord(label="Two", value=2),
            OptionRecord(label="Three", value=3),
        ),
        value=[3, 1, 42],
        mode="multiple",
    )
    view = dropdown.view()
    assert view.mode is SelectionMode.MULTIPLE
    assert [(chip.value, chip.label) for chip in view.chips] == [(3, "Three"), (1, "One")]
    assert view.display_label == "3 selected"
    assert view.has_selection
    assert view.semantics.listbox["aria-multiselectable"] == "true"


def test_option_ids_follow_catalog_position_under_filtering(make_dropdown) -> None:
    dropdown = make_dropdown(
        options=(OptionRecord(label="Apple", value=1), OptionRecord(label="Banana", value=2)),
        searchable=True,
    )
    dropdown.on_trigger_activate()
    dropdown.on_search_change("ban")
    view = dropdown.view()
    assert [o.option_id for o in view.visible_options] == ["dropdown-option-1"]
    assert view.search_term == "ban"
    assert view.search_focused
