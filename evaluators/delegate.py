"""
Face Trigger Delegate Module

The delegate is the event sink evaluators report to. Each gesture has an
optional callback pair: a "changed" callback receiving the new boolean, and a
"fired" callback with no payload, called only when the gesture becomes active.

Any object exposing these attribute names works as a delegate (slots are read
with getattr); FaceTriggerDelegate is a convenience struct where every slot
defaults to None.
"""

from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Optional

ChangedCallback = Callable[[bool], Any]
FiredCallback = Callable[[], Any]


@dataclass
class FaceTriggerDelegate:
    """Optional callbacks, one changed/fired pair per gesture. Unset slots are skipped."""
    on_smile_changed: Optional[ChangedCallback] = None
    on_smile: Optional[FiredCallback] = None
    on_blink_changed: Optional[ChangedCallback] = None
    on_blink: Optional[FiredCallback] = None
    on_blink_left_changed: Optional[ChangedCallback] = None
    on_blink_left: Optional[FiredCallback] = None
    on_blink_right_changed: Optional[ChangedCallback] = None
    on_blink_right: Optional[FiredCallback] = None
    on_brow_down_changed: Optional[ChangedCallback] = None
    on_brow_down: Optional[FiredCallback] = None
    on_brow_up_changed: Optional[ChangedCallback] = None
    on_brow_up: Optional[FiredCallback] = None
    on_squint_changed: Optional[ChangedCallback] = None
    on_squint: Optional[FiredCallback] = None
    on_cheek_puff_changed: Optional[ChangedCallback] = None
    on_cheek_puff: Optional[FiredCallback] = None
    on_mouth_pucker_changed: Optional[ChangedCallback] = None
    on_mouth_pucker: Optional[FiredCallback] = None
    on_jaw_open_changed: Optional[ChangedCallback] = None
    on_jaw_open: Optional[FiredCallback] = None
    on_jaw_left_changed: Optional[ChangedCallback] = None
    on_jaw_left: Optional[FiredCallback] = None
    on_jaw_right_changed: Optional[ChangedCallback] = None
    on_jaw_right: Optional[FiredCallback] = None


class Effect(NamedTuple):
    """Names of the delegate slots one derived signal reports to."""
    changed_slot: str
    fired_slot: str


def effect_for(gesture: str) -> Effect:
    """Slot names for a gesture, e.g. "jaw_open" -> on_jaw_open_changed / on_jaw_open."""
    return Effect(f"on_{gesture}_changed", f"on_{gesture}")


def emit(delegate: Any, effect: Optional[Effect], active: bool) -> None:
    """
    Report a state change: changed(active), then fired() if active.

    A None effect is a deliberate no-op. Missing or None slots on the delegate
    are skipped; exceptions raised by callbacks propagate to the caller.
    """
    if effect is None:
        return
    on_changed = getattr(delegate, effect.changed_slot, None)
    if on_changed is not None:
        on_changed(active)
    if active:
        on_fired = getattr(delegate, effect.fired_slot, None)
        if on_fired is not None:
            on_fired()
