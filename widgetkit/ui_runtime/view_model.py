"""View-model projection for rendering layers."""

from __future__ import annotations

from widgetkit.api.dropdown import (
    ChipView,
    DropdownView,
    ListboxSemantics,
    MultipleSelection,
    OptionKey,
    OptionView,
    SelectionMode,
)
from widgetkit.ui_runtime.catalog import OptionCatalog
from widgetkit.ui_runtime.controller import InteractionController


def option_id(widget_id: str, catalog: OptionCatalog, key: OptionKey) -> str:
    """Stable element id derived from the option's catalog position."""
    return f"{widget_id}-option-{catalog.position(key)}"


def listbox_semantics(*, widget_id: str, is_open: bool, mode: SelectionMode) -> ListboxSemantics:
    trigger = {
        "aria-haspopup": "listbox",
        "aria-expanded": "true" if is_open else "false",
        "aria-controls": f"{widget_id}-listbox",
    }
    listbox = {
        "id": f"{widget_id}-listbox",
        "role": "listbox",
        "aria-multiselectable": "true" if mode is SelectionMode.MULTIPLE else "false",
    }
    return ListboxSemantics(trigger=trigger, listbox=listbox)


def project_chips(catalog: OptionCatalog, selection: MultipleSelection) -> tuple[ChipView, ...]:
    chips: list[ChipView] = []
    for key in selection.keys:
        option = catalog.find(key)
        # Keys the catalog no longer knows get no chip.
        if option is None:
            continue
        chips.append(ChipView(value=key, label=option.label, decoration=option.decoration))
    return tuple(chips)


def project_view(
    controller: InteractionController,
    *,
    widget_id: str,
    placeholder: str,
    label: str | None,
) -> DropdownView:
    """Project controller state into an immutable view snapshot."""
    catalog = controller.catalog
    store = controller.store
    selection = store.selection
    is_open = controller.is_open
    focus_index = controller.focus_index

    visible = tuple(
        OptionView(
            option_id=option_id(widget_id, catalog, option.value),
            label=option.label,
            value=option.value,
            disabled=option.disabled,
            selected=selection.contains(option.value),
            focused=index == focus_index,
            decoration=option.decoration,
        )
        for index, option in enumerate(controller.visible)
    )
    active = visible[focus_index].option_id if is_open and 0 <= focus_index < len(visible) else None
    display_label = store.describe(catalog, placeholder)
    chips = project_chips(catalog, selection) if isinstance(selection, MultipleSelection) else ()

    return DropdownView(
        is_open=is_open,
        visible_options=visible if is_open else (),
        focus_index=focus_index,
        selection=selection,
        search_term=controller.search_term,
        search_focused=controller.search_focused,
        is_empty=is_open and not visible,
        display_label=display_label,
        is_placeholder=store.describe(catalog, "") == "",
        chips=chips,
        has_selection=not selection.is_empty,
        disabled=controller.disabled,
        searchable=controller.searchable,
        mode=store.mode,
        label=label,
        placeholder=placeholder,
        active_descendant=active,
        semantics=listbox_semantics(widget_id=widget_id, is_open=is_open, mode=store.mode),
    )
