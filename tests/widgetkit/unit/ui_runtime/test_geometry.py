from widgetkit.api.input_events import PointerEvent
from widgetkit.ui_runtime.geometry import BoundsDismissalPredicate, Rect


def _down(x: float, y: float) -> PointerEvent:
    return PointerEvent(event_type="pointer_down", x=x, y=y)


def test_rect_contains_is_inclusive() -> None:
    rect = Rect(10, 10, 20, 5)
    assert rect.contains(10, 10)
    assert rect.contains(30, 15)
    assert not rect.contains(31, 15)


def test_bounds_predicate_checks_trigger_and_menu() -> None:
    predicate = BoundsDismissalPredicate(trigger=Rect(0, 0, 100, 30), menu=Rect(0, 32, 100, 200))
    assert not predicate(_down(50, 10))
    assert not predicate(_down(50, 100))
    assert predicate(_down(50, 31))
    assert predicate(_down(300, 10))


def test_bounds_predicate_updates_and_handles_missing_menu() -> None:
    predicate = BoundsDismissalPredicate()
    assert predicate(_down(0, 0))
    predicate.set_bounds(trigger=Rect(0, 0, 10, 10), menu=None)
    assert not predicate(_down(5, 5))
    assert predicate(_down(5, 50))
