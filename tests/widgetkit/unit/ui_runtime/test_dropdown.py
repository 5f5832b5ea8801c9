from __future__ import annotations

from widgetkit.api.dropdown import (
    DropdownProps,
    InteractionState,
    MultipleSelection,
    OptionRecord,
    SingleSelection,
)
from widgetkit.diagnostics import DiagnosticHub
from widgetkit.runtime.events import EventBus
from widgetkit.ui_runtime.dropdown import Dropdown

from tests.widgetkit.conftest import ChangeRecorder, FakeOutsidePredicate, letters, outside_click


def test_initial_value_is_normalized(make_dropdown, fruit_options) -> None:
    dropdown = make_dropdown(options=fruit_options, value="banana")
    assert dropdown.state is InteractionState.CLOSED
    assert dropdown.selection == SingleSelection("banana")
    assert dropdown.value == "banana"


def test_update_adopts_host_value_without_emitting(make_dropdown, recorder, fruit_options) -> None:
    dropdown = make_dropdown(options=fruit_options, value="apple")
    dropdown.update(DropdownProps(options=fruit_options, value="grape"))
    assert dropdown.value == "grape"
    assert recorder.values == []


def test_update_with_same_value_keeps_local_selection(make_dropdown, recorder, fruit_options) -> None:
    dropdown = make_dropdown(options=fruit_options, value=None)
    dropdown.on_trigger_activate()
    dropdown.on_option_activate("banana")
    assert recorder.values == ["banana"]
    # Host re-renders with the value it held before handling on_change.
    dropdown.update(DropdownProps(options=fruit_options, value=None))
    assert dropdown.value == "banana"


def test_controlled_host_can_reject_a_change(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), value=1, controlled=True)
    dropdown.on_trigger_activate()
    dropdown.on_option_activate(2)
    assert recorder.values == [2]
    # The host declines the change and re-renders with its old value.
    dropdown.update(DropdownProps(options=letters(3), value=1, controlled=True))
    assert dropdown.value == 1
    assert dropdown.view().display_label == "A"
    assert recorder.values == [2]


def test_controlled_host_can_reset_to_placeholder(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), value=None, controlled=True)
    dropdown.on_trigger_activate()
    dropdown.on_option_activate(3)
    dropdown.update(DropdownProps(options=letters(3), value=None, controlled=True))
    view = dropdown.view()
    assert view.is_placeholder
    assert view.display_label == "Select..."


def test_in_place_edit_of_host_list_is_adopted(make_dropdown, recorder) -> None:
    host_values = [1]
    dropdown = make_dropdown(options=letters(3), value=host_values, mode="multiple")
    host_values.append(2)
    dropdown.update(DropdownProps(options=letters(3), value=host_values, mode="multiple"))
    assert dropdown.value == [1, 2]
    assert recorder.values == []


def test_relabel_keeps_selection_and_does_not_emit(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), value=2)
    dropdown.update(
        DropdownProps(
            options=(
                OptionRecord(label="Alpha", value=1),
                OptionRecord(label="Bravo", value=2),
                OptionRecord(label="Charlie", value=3),
            ),
            value=2,
        )
    )
    assert dropdown.view().display_label == "Bravo"
    assert recorder.values == []


def test_mode_change_rebuilds_selection(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), value=2)
    dropdown.update(DropdownProps(options=letters(3), value=[1, 3], mode="multiple"))
    assert dropdown.selection == MultipleSelection((1, 3))
    assert dropdown.value == [1, 3]
    assert recorder.values == []


def test_disabling_while_open_closes_and_blocks_interaction(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(2))
    dropdown.on_trigger_activate()
    assert dropdown.is_open
    dropdown.update(DropdownProps(options=letters(2), disabled=True))
    assert not dropdown.is_open
    assert not dropdown.listening
    dropdown.on_trigger_activate()
    assert not dropdown.is_open
    assert dropdown.on_key_down("Enter") is False
    dropdown.on_clear()
    assert recorder.values == []


def test_reselect_is_silent_by_default(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(2), value=1)
    dropdown.on_trigger_activate()
    dropdown.on_option_activate(1)
    assert not dropdown.is_open
    assert recorder.values == []


def test_reselect_emits_when_requested(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(2), value=1, emit_on_reselect=True)
    dropdown.on_trigger_activate()
    dropdown.on_option_activate(1)
    assert recorder.values == [1]


def test_clear_emits_empty_value_once(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), value=[1, 2], mode="multiple")
    dropdown.on_clear()
    dropdown.on_clear()
    assert recorder.values == [[]]


def test_chip_remove_emits_remaining_keys(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), value=[1, 2, 3], mode="multiple")
    dropdown.on_chip_remove(2)
    dropdown.on_chip_remove(42)
    assert recorder.values == [[1, 3]]
    assert [chip.value for chip in dropdown.view().chips] == [1, 3]


def test_keyboard_selection_emits_once(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3))
    assert dropdown.on_key_down("Enter") is True
    assert dropdown.is_open
    assert dropdown.on_key_down("ArrowDown") is True
    assert dropdown.on_key_down("Enter") is True
    assert recorder.values == [2]
    assert not dropdown.is_open
    assert dropdown.on_key_down("F5") is False


def test_outside_click_closes_without_changing_selection(make_dropdown, environment, recorder) -> None:
    dropdown = make_dropdown(options=letters(2), value=1)
    dropdown.on_trigger_activate()
    assert dropdown.listening
    environment.publish(outside_click())
    assert not dropdown.is_open
    assert not dropdown.listening
    assert dropdown.value == 1
    assert recorder.values == []


def test_update_swaps_change_handler_and_predicate(make_dropdown, environment, recorder) -> None:
    dropdown = make_dropdown(options=letters(2))
    replacement = ChangeRecorder()
    dropdown.update(DropdownProps(options=letters(2)), on_change=replacement, is_outside=lambda event: False)
    dropdown.on_trigger_activate()
    environment.publish(outside_click())
    assert dropdown.is_open
    dropdown.on_option_activate(2)
    assert replacement.values == [2]
    assert recorder.values == []


def test_dispose_releases_listeners_and_ignores_later_calls(make_dropdown, environment, recorder) -> None:
    dropdown = make_dropdown(options=letters(2))
    dropdown.on_trigger_activate()
    assert environment.subscriber_count() == 2
    dropdown.dispose()
    assert dropdown.disposed
    assert environment.subscriber_count() == 0
    dropdown.on_trigger_activate()
    dropdown.on_option_activate(1)
    assert not dropdown.is_open
    assert recorder.values == []


def test_context_manager_disposes() -> None:
    environment = EventBus()
    recorder = ChangeRecorder()
    with Dropdown(
        DropdownProps(options=letters(2)),
        on_change=recorder,
        environment=environment,
        is_outside=FakeOutsidePredicate(),
    ) as dropdown:
        dropdown.on_trigger_activate()
        assert environment.subscriber_count() == 2
    assert environment.subscriber_count() == 0
    assert dropdown.disposed


def test_handlers_are_bound_to_the_engine(make_dropdown, recorder) -> None:
    dropdown = make_dropdown(options=letters(3), searchable=True)
    handlers = dropdown.handlers()
    handlers.on_trigger_activate()
    handlers.on_search_change("c")
    assert [o.label for o in dropdown.view().visible_options] == ["C"]
    assert handlers.on_key_down("Enter") is True
    assert recorder.values == [3]
    assert dropdown.handlers() is handlers


def test_invalid_configuration_is_reported_to_diagnostics(make_dropdown, hub: DiagnosticHub) -> None:
    dropdown = make_dropdown(
        options=(
            OptionRecord(label="A", value=1),
            OptionRecord(label="A again", value=1),
            {"label": "no value"},
        ),
        value=[1],
    )
    dropdown.on_trigger_activate()
    assert [o.label for o in dropdown.view().visible_options] == ["A"]
    assert dropdown.value is None
    names = [event.name for event in hub.snapshot(category="dropdown")]
    assert "duplicate_key" in names
    assert "invalid_option" in names
    assert "value_shape_mismatch" in names
