"""Public dropdown/combobox API contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from widgetkit.api.input_events import PointerEvent

if TYPE_CHECKING:
    from widgetkit.api.events import EventBus
    from widgetkit.diagnostics.hub import DiagnosticHub
    from widgetkit.ui_runtime.dropdown import Dropdown

type OptionKey = str | int
type HostValue = OptionKey | Sequence[OptionKey] | None
type RawOption = OptionRecord | Mapping[str, object]
type ChangeHandler = Callable[[HostValue], None]


@dataclass(frozen=True, slots=True)
class OptionRecord:
    """One selectable record of the option catalog."""

    label: str
    value: OptionKey
    disabled: bool = False
    decoration: object | None = None


class SelectionMode(Enum):
    """Value shape the host works with."""

    SINGLE = "single"
    MULTIPLE = "multiple"

    @classmethod
    def coerce(cls, value: SelectionMode | str) -> SelectionMode:
        if isinstance(value, SelectionMode):
            return value
        normalized = str(value).strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(f"unknown selection mode: {value!r}")


class InteractionState(Enum):
    """Open/closed state of the option menu."""

    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True, slots=True)
class SingleSelection:
    """Scalar selection; ``key is None`` means nothing is selected."""

    key: OptionKey | None = None

    @property
    def is_empty(self) -> bool:
        return self.key is None

    def contains(self, key: OptionKey) -> bool:
        return self.key is not None and self.key == key


@dataclass(frozen=True, slots=True)
class MultipleSelection:
    """Ordered, duplicate-free selection in insertion order."""

    keys: tuple[OptionKey, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.keys

    def contains(self, key: OptionKey) -> bool:
        return key in self.keys


type Selection = SingleSelection | MultipleSelection


class DismissalPredicate(Protocol):
    """Platform-supplied test for "this pointer interaction is outside the control"."""

    def __call__(self, event: PointerEvent) -> bool: ...


@dataclass(frozen=True, slots=True)
class DropdownProps:
    """Host-supplied inputs, re-supplied on every update.

    With ``controlled=True`` every ``update`` shows ``value`` as given, so a host
    that keeps its old value after ``on_change`` rejects the change. Otherwise
    ``value`` is adopted only when it differs from the previous update's.
    """

    options: Sequence[RawOption] = ()
    value: HostValue = None
    mode: SelectionMode | str = SelectionMode.SINGLE
    searchable: bool = False
    disabled: bool = False
    placeholder: str = "Select..."
    label: str | None = None
    widget_id: str = "dropdown"
    emit_on_reselect: bool = False
    controlled: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", SelectionMode.coerce(self.mode))
        object.__setattr__(self, "options", tuple(self.options))
        # Snapshot sequence values so in-place edits by the host show up as changes.
        if isinstance(self.value, Sequence) and not isinstance(self.value, str):
            object.__setattr__(self, "value", tuple(self.value))


@dataclass(frozen=True, slots=True)
class OptionView:
    """Render-ready projection of one visible option."""

    option_id: str
    label: str
    value: OptionKey
    disabled: bool
    selected: bool
    focused: bool
    decoration: object | None = None


@dataclass(frozen=True, slots=True)
class ChipView:
    """Removable tag shown on the trigger for each selected key (multiple mode)."""

    value: OptionKey
    label: str
    decoration: object | None = None


@dataclass(frozen=True, slots=True)
class ListboxSemantics:
    """Accessibility attributes for the trigger and listbox elements."""

    trigger: dict[str, str] = field(default_factory=dict)
    listbox: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DropdownView:
    """Plain view-model snapshot consumed by any rendering layer."""

    is_open: bool
    visible_options: tuple[OptionView, ...]
    focus_index: int
    selection: Selection
    search_term: str
    search_focused: bool
    is_empty: bool
    display_label: str
    is_placeholder: bool
    chips: tuple[ChipView, ...]
    has_selection: bool
    disabled: bool
    searchable: bool
    mode: SelectionMode
    label: str | None
    placeholder: str
    active_descendant: str | None
    semantics: ListboxSemantics


@dataclass(frozen=True, slots=True)
class DropdownHandlers:
    """Handler bindings a rendering layer attaches to concrete elements."""

    on_trigger_activate: Callable[[], None]
    on_search_change: Callable[[str], None]
    on_option_activate: Callable[[OptionKey], None]
    on_key_down: Callable[[str], bool]
    on_clear: Callable[[], None]
    on_chip_remove: Callable[[OptionKey], None]


def create_dropdown(
    props: DropdownProps,
    *,
    on_change: ChangeHandler,
    environment: EventBus | None = None,
    is_outside: DismissalPredicate | None = None,
    diagnostics: DiagnosticHub | None = None,
) -> Dropdown:
    """Create default dropdown selection engine."""
    from widgetkit.ui_runtime.dropdown import Dropdown

    return Dropdown(
        props,
        on_change=on_change,
        environment=environment,
        is_outside=is_outside,
        diagnostics=diagnostics,
    )
