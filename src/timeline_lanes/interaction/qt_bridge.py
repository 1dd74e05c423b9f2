"""
Session Signals
===============

Qt adapter for InteractionSession.

Views forward their mouse events here and connect to the signals instead of
polling return values, following the signal conventions of Qt views.

Signals:
    gesture_started(item_id, InteractionMode): Gesture began
    candidate_changed(IntervalUpdate): New candidate (not committed yet)
    gesture_committed(IntervalUpdate): Gesture committed with a change
    gesture_cancelled(Interval): Gesture cancelled, carries the original interval
    status_message(str, bool): message, is_error
"""

from typing import Any, Hashable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..timing.time_converter import TimeConverter
from ..types import HitZone, InteractionMode, Interval, IntervalUpdate
from .session import InteractionSession


class SessionSignals(QObject):
    """
    Wraps an InteractionSession and emits its results as Qt signals.

    candidate_changed is only emitted when the candidate differs from the
    previous one, so a view repaints once per snap step rather than once per
    mouse move.
    """

    gesture_started = pyqtSignal(object, object)  # item_id, InteractionMode
    candidate_changed = pyqtSignal(object)  # IntervalUpdate
    gesture_committed = pyqtSignal(object)  # IntervalUpdate
    gesture_cancelled = pyqtSignal(object)  # Interval
    status_message = pyqtSignal(str, bool)  # message, is_error

    def __init__(self, session: InteractionSession, parent=None):
        super().__init__(parent)
        self._session = session
        self._last_candidate: Optional[Interval] = None
        self._gesture_unit: Any = None

    @property
    def session(self) -> InteractionSession:
        return self._session

    def pointer_down(self, item_id: Hashable, pointer_pos: float, hit_zone: Optional[HitZone]) -> bool:
        """Forward a pointer-down. Returns True if a gesture started."""
        started = self._session.on_pointer_down(item_id, pointer_pos, hit_zone)
        if started:
            self._gesture_unit = self._session.state.view.unit
            self._last_candidate = None
            self.gesture_started.emit(item_id, self._session.mode)
        return started

    def pointer_move(self, pointer_pos: float) -> Optional[Interval]:
        """Forward a pointer-move. Returns the candidate, if any."""
        candidate = self._session.on_pointer_move(pointer_pos)
        if candidate is not None and candidate != self._last_candidate:
            self._last_candidate = candidate
            self.candidate_changed.emit(self._session.last_update)
        return candidate

    def pointer_up(self) -> Optional[Interval]:
        """Forward a pointer-up. Returns the committed interval, if any."""
        final = self._session.on_pointer_up()
        self._last_candidate = None
        if final is None:
            return None

        update = self._session.last_update
        if update is not None and update.changed:
            self.gesture_committed.emit(update)
            self.status_message.emit(self._describe(update), False)
        return final

    def pointer_cancel(self) -> Optional[Interval]:
        """Forward a cancellation. Returns the restored interval, if any."""
        original = self._session.on_pointer_cancel()
        self._last_candidate = None
        if original is not None:
            self.gesture_cancelled.emit(original)
            self.status_message.emit(f"Cancelled edit of '{original.id}'", False)
        return original

    def _describe(self, update: IntervalUpdate) -> str:
        """Status line for a committed update."""
        unit = self._gesture_unit
        old, new = update.old_interval, update.new_interval
        if update.mode == InteractionMode.DRAGGING:
            units = TimeConverter.elapsed_units(old.start, new.start, unit)
            return f"Moved '{update.item_id}' by {TimeConverter.format_units(units, unit)}"
        if update.mode == InteractionMode.RESIZING_START:
            units = TimeConverter.elapsed_units(old.start, new.start, unit)
            return f"Resized start of '{update.item_id}' by {TimeConverter.format_units(units, unit)}"
        units = TimeConverter.elapsed_units(old.end, new.end, unit)
        return f"Resized end of '{update.item_id}' by {TimeConverter.format_units(units, unit)}"
