"""Cursor motions bound as keymap actions.

In a visual mode moving the cursor extends the selection, since the anchor
stays put; a ``visual.selection`` event is emitted so hosts can repaint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from lined.modes.base_mode import ModeContext, ModeResult
from lined.motions import MOTIONS

if TYPE_CHECKING:
    from lined.keymaps import ResolutionMatch

MotionAction = Callable[[ModeContext, "ResolutionMatch"], ModeResult]


def apply_motion(context: ModeContext, motion_id: str) -> ModeResult:
    buffer = context.buffer
    motion = MOTIONS[motion_id]
    target = buffer.move_cursor(motion(buffer.lines, buffer.state.cursor))
    anchor = buffer.state.anchor
    if anchor is not None:
        context.bus.emit(
            "visual.selection",
            {"anchor": anchor, "cursor": target, "motion": motion_id},
        )
        return ModeResult(consumed=True, status="visual_select", message=motion_id)
    return ModeResult(consumed=True, status="motion", message=motion_id)


def motion_action(motion_id: str) -> MotionAction:
    if motion_id not in MOTIONS:
        raise KeyError(f"Unknown motion '{motion_id}'")

    def handler(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
        del match
        return apply_motion(context, motion_id)

    handler.__name__ = f"move_{motion_id}"
    return handler


MOTION_ACTIONS: Dict[str, MotionAction] = {
    motion_id: motion_action(motion_id) for motion_id in MOTIONS
}

__all__ = ["apply_motion", "motion_action", "MOTION_ACTIONS"]
