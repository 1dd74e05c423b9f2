"""
Interaction Session
===================

Turns pointer gestures into validated interval updates.

The gesture logic is a set of pure transition functions over an immutable
InteractionState, so it can be tested with plain pointer samples and no
rendering surface. InteractionSession wraps them with the state a host view
needs to keep between events.

State Machine:
    NONE -> (pointer_down on body) -> DRAGGING -------+
    NONE -> (pointer_down on leading edge) -> RESIZING_START
    NONE -> (pointer_down on trailing edge) -> RESIZING_END
                                                      |
          (pointer_move: recompute candidate from origin, same state)
                                                      |
                        (pointer_up: commit) / (pointer_cancel: revert)
                                                      v
                                                    NONE

Every move maps ``pointer - origin_pointer`` onto the *origin* interval,
never onto the previous candidate, so repeated rounding cannot drift.
An invalid proposal leaves the previous candidate in place.
"""

from dataclasses import replace
from typing import Hashable, Optional, Tuple

from ..interfaces import IntervalSourceInterface, find_interval
from ..logging import TimelineLog as Log
from ..timing.geometry import pixel_delta_to_time_delta, propose_interval
from ..timing.snap_calculator import SnapCalculator
from ..types import (
    HitZone, IDLE_STATE, InteractionMode, InteractionState,
    Interval, IntervalUpdate, ViewWindow
)

ZONE_MODES = {
    HitZone.BODY: InteractionMode.DRAGGING,
    HitZone.LEADING_EDGE: InteractionMode.RESIZING_START,
    HitZone.TRAILING_EDGE: InteractionMode.RESIZING_END,
}


# =============================================================================
# Pure Transitions
# =============================================================================

def begin_gesture(
    state: InteractionState,
    interval: Interval,
    pointer: float,
    hit_zone: HitZone,
    view: ViewWindow
) -> InteractionState:
    """
    Start a gesture on an interval.

    Returns the unchanged state if a gesture is already active.
    """
    if state.is_active:
        return state
    return InteractionState(
        mode=ZONE_MODES[hit_zone],
        target_id=interval.id,
        origin_pointer=pointer,
        origin_interval=interval,
        view=view,
    )


def advance_gesture(
    state: InteractionState,
    pointer: float,
    snap: Optional[SnapCalculator] = None
) -> Tuple[InteractionState, Optional[Interval]]:
    """
    Apply a pointer position to the active gesture.

    Returns:
        (new_state, candidate) where candidate is None if idle or if the
        proposal was invalid (the previous candidate is kept in the state)
    """
    if not state.is_active:
        return state, None

    delta = pointer - state.origin_pointer
    time_delta = pixel_delta_to_time_delta(state.view, delta, snap)
    candidate = propose_interval(state.origin_interval, state.mode, time_delta)

    if candidate is None:
        return replace(state, accumulated_delta=delta), None
    return replace(state, accumulated_delta=delta, candidate=candidate), candidate


def end_gesture(state: InteractionState) -> Tuple[InteractionState, Optional[Interval]]:
    """
    Finish the gesture (pointer-up).

    Returns:
        (idle_state, final) where final is the last valid candidate,
        or None if the gesture never produced one
    """
    if not state.is_active:
        return state, None
    return IDLE_STATE, state.candidate


def cancel_gesture(state: InteractionState) -> Tuple[InteractionState, Optional[Interval]]:
    """
    Abandon the gesture without committing.

    Returns:
        (idle_state, original) where original is the pre-gesture interval
    """
    if not state.is_active:
        return state, None
    return IDLE_STATE, state.origin_interval


# =============================================================================
# Session
# =============================================================================

class InteractionSession:
    """
    Holds the gesture state of one timeline view.

    Each view constructs its own session; sessions share nothing, so several
    timelines can be edited independently. Only one gesture is active per
    session. Invalid input never raises: it degrades to "no change".

    Attributes:
        view: View window used for new gestures
        snap_calculator: Quantization of time deltas (default: one unit;
            pass SnapCalculator(snap_enabled=False) for continuous motion)
        last_update: Most recent IntervalUpdate (candidate or commit)
    """

    def __init__(
        self,
        source: IntervalSourceInterface,
        view: ViewWindow,
        snap_calculator: Optional[SnapCalculator] = None
    ):
        self._source = source
        self.view = view
        self.snap_calculator = snap_calculator if snap_calculator is not None else SnapCalculator()
        self._state = IDLE_STATE
        self.last_update: Optional[IntervalUpdate] = None

    @property
    def state(self) -> InteractionState:
        """Current gesture state (immutable snapshot)."""
        return self._state

    @property
    def is_active(self) -> bool:
        """Whether a gesture is in progress."""
        return self._state.is_active

    @property
    def mode(self) -> InteractionMode:
        """Current gesture mode."""
        return self._state.mode

    # =========================================================================
    # Pointer Events
    # =========================================================================

    def on_pointer_down(self, item_id: Hashable, pointer_pos: float, hit_zone: Optional[HitZone]) -> bool:
        """
        Begin a drag or resize on an item.

        Args:
            item_id: Item under the pointer
            pointer_pos: Pointer coordinate on the time axis
            hit_zone: Zone of the item that was hit (None = missed the item)

        Returns:
            True if a gesture started
        """
        if self._state.is_active:
            Log.warning(
                f"InteractionSession: pointer_down on {item_id!r} ignored, "
                f"gesture on {self._state.target_id!r} still active"
            )
            return False

        if hit_zone is None:
            return False

        interval = find_interval(self._source, item_id)
        if interval is None:
            Log.debug(f"InteractionSession: unknown item {item_id!r}, gesture not started")
            return False

        self._state = begin_gesture(self._state, interval, pointer_pos, hit_zone, self.view)
        self.last_update = None
        Log.debug(f"InteractionSession: {self._state.mode.name} {item_id!r} from {pointer_pos}")
        return True

    def on_pointer_move(self, pointer_pos: float) -> Optional[Interval]:
        """
        Update the active gesture.

        Args:
            pointer_pos: Current pointer coordinate on the time axis

        Returns:
            The new candidate interval, or None if idle or the move was rejected
        """
        if not self._state.is_active:
            return None

        if not self._target_exists():
            return None

        self._state, candidate = advance_gesture(self._state, pointer_pos, self.snap_calculator)
        if candidate is not None:
            self.last_update = self._candidate_update(candidate)
        return candidate

    def on_pointer_up(self) -> Optional[Interval]:
        """
        Commit the active gesture.

        Returns:
            The final interval, or None if nothing valid was produced
            (the item is then left unchanged)
        """
        if not self._state.is_active:
            return None

        if not self._target_exists():
            return None

        state = self._state
        self._state, final = end_gesture(state)

        if final is None:
            Log.debug(f"InteractionSession: {state.mode.name} on {state.target_id!r} ended without a valid candidate")
            return None

        self.last_update = IntervalUpdate(
            item_id=state.target_id,
            mode=state.mode,
            old_interval=state.origin_interval,
            new_interval=final,
            committed=True,
        )
        Log.info(f"InteractionSession: committed {state.mode.name} of {state.target_id!r}")
        return final

    def on_pointer_cancel(self) -> Optional[Interval]:
        """
        Cancel the active gesture (pointer capture lost, Escape).

        Nothing is committed. Returns the pre-gesture interval so the host
        can undo any live feedback, or None if no gesture was active.
        """
        if not self._state.is_active:
            return None

        Log.debug(f"InteractionSession: cancelling {self._state.mode.name} of {self._state.target_id!r}")
        self._state, original = cancel_gesture(self._state)
        self.last_update = None
        return original

    # =========================================================================
    # Internal
    # =========================================================================

    def _target_exists(self) -> bool:
        """Abort silently if the target vanished from the host's list."""
        if find_interval(self._source, self._state.target_id) is not None:
            return True
        Log.debug(f"InteractionSession: item {self._state.target_id!r} disappeared, gesture aborted")
        self._state = IDLE_STATE
        self.last_update = None
        return False

    def _candidate_update(self, candidate: Interval) -> IntervalUpdate:
        return IntervalUpdate(
            item_id=self._state.target_id,
            mode=self._state.mode,
            old_interval=self._state.origin_interval,
            new_interval=candidate,
            committed=False,
        )
