"""Option catalog normalization and key lookup."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from widgetkit.api.dropdown import OptionKey, OptionRecord, RawOption
from widgetkit.runtime.errors import AnomalyReporter, configuration_anomaly


def is_option_key(value: object) -> bool:
    """Return whether value is a usable key (``str`` or non-bool ``int``)."""
    return isinstance(value, str) or (isinstance(value, int) and not isinstance(value, bool))


def coerce_option(raw: RawOption) -> OptionRecord | None:
    """Convert one host record into an ``OptionRecord``; ``None`` when unusable."""
    if isinstance(raw, OptionRecord):
        record = raw
    elif isinstance(raw, Mapping):
        if "label" not in raw or "value" not in raw:
            return None
        decoration = raw.get("decoration", raw.get("icon"))
        record = OptionRecord(
            label=raw["label"],  # type: ignore[arg-type]
            value=raw["value"],  # type: ignore[arg-type]
            disabled=bool(raw.get("disabled", False)),
            decoration=decoration,
        )
    else:
        return None
    if not isinstance(record.label, str) or not is_option_key(record.value):
        return None
    return record


def normalize_options(
    raw_options: Iterable[RawOption],
    report: AnomalyReporter,
) -> tuple[OptionRecord, ...]:
    """Normalize host records; duplicate keys resolve first-occurrence-wins."""
    seen: set[OptionKey] = set()
    records: list[OptionRecord] = []
    for position, raw in enumerate(raw_options):
        record = coerce_option(raw)
        if record is None:
            configuration_anomaly(
                report,
                "invalid_option",
                f"dropping option at position {position}: needs a str label and a str/int value",
                position=position,
            )
            continue
        if record.value in seen:
            configuration_anomaly(
                report,
                "duplicate_key",
                f"option key {record.value!r} at position {position} repeats an earlier key; "
                "keeping the first occurrence",
                key=record.value,
                position=position,
            )
            continue
        seen.add(record.value)
        records.append(record)
    return tuple(records)


class OptionCatalog:
    """Normalized, key-indexed option list."""

    __slots__ = ("_options", "_by_key", "_positions")

    def __init__(self, options: tuple[OptionRecord, ...] = ()) -> None:
        self._options = options
        self._by_key: dict[OptionKey, OptionRecord] = {}
        self._positions: dict[OptionKey, int] = {}
        for position, option in enumerate(options):
            self._by_key[option.value] = option
            self._positions[option.value] = position

    @classmethod
    def from_raw(cls, raw_options: Iterable[RawOption], report: AnomalyReporter) -> OptionCatalog:
        return cls(normalize_options(raw_options, report))

    @property
    def options(self) -> tuple[OptionRecord, ...]:
        return self._options

    def __len__(self) -> int:
        return len(self._options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionCatalog):
            return NotImplemented
        return self._options == other._options

    __hash__ = None  # type: ignore[assignment]

    def contains(self, key: OptionKey) -> bool:
        return key in self._by_key

    def find(self, key: OptionKey) -> OptionRecord | None:
        return self._by_key.get(key)

    def label_for(self, key: OptionKey) -> str | None:
        option = self._by_key.get(key)
        return option.label if option is not None else None

    def position(self, key: OptionKey) -> int:
        """Return catalog index of key, or -1."""
        return self._positions.get(key, -1)
