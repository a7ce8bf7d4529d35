"""
Module: persistence.autosave

Purpose:
    Debounced auto-save. Every change to the document re-arms a timer;
    when the document has been quiet for ``delay`` seconds the payload is
    handed to a writer and the editor's save status follows the outcome.

Key Classes:
    - AutoSaver: Change listener + debounce timer + save status driver

Dependencies:
    - threading (std): Default timer

Used By:
    - Application shells that persist designs
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from doculoom.editor.document import DocumentEditor, SaveStatus

from .payload import build_design_payload

logger = logging.getLogger(__name__)

Writer = Callable[[dict], Any]
TimerFactory = Callable[[float, Callable[[], None]], Any]


class AutoSaver:
    """
    Save the document a fixed delay after its last change.

    Status transitions: a change gives UNSAVED (set by the editor), the
    write gives SAVING, then SAVED or ERROR. After ERROR the next change
    goes back to UNSAVED and re-arms the timer.

    Example:
        >>> saver = AutoSaver(editor, writer=lambda p: write_design_file(path, p))
        >>> editor.add_element(create_text_element(0, 0))
        >>> saver.flush()  # write now instead of waiting
        True
    """

    def __init__(
        self,
        editor: DocumentEditor,
        writer: Writer,
        payload_factory: Optional[Callable[[], dict]] = None,
        *,
        delay: Optional[float] = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.editor = editor
        self.writer = writer
        self.payload_factory = payload_factory or (lambda: build_design_payload(editor))
        self.delay = editor.config.autosave_delay if delay is None else delay
        self._timer_factory = timer_factory
        self._timer = None
        self._revision = 0
        self._state_lock = threading.Lock()
        self._write_lock = threading.Lock()
        editor.add_change_listener(self._on_change)

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def _on_change(self) -> None:
        with self._state_lock:
            self._revision += 1
            self._cancel_locked()
            timer = self._timer_factory(self.delay, lambda: self._fire(timer))
            if hasattr(timer, "daemon"):
                timer.daemon = True
            self._timer = timer
            timer.start()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, timer) -> bool:
        # A superseded or cancelled timer must not write
        with self._state_lock:
            if self._timer is not timer:
                return False
            self._timer = None
        return self._write()

    def flush(self) -> bool:
        """
        Write now if there are unsaved changes.

        Any pending timer is cancelled first.

        Returns:
            True when a write succeeded
        """
        with self._state_lock:
            self._cancel_locked()
        return self._write()

    def _write(self) -> bool:
        with self._write_lock:
            if not self.editor.dirty:
                return False
            with self._state_lock:
                revision = self._revision
            self.editor.mark_saving()
            try:
                self.writer(self.payload_factory())
            except Exception as e:
                logger.error(f"Auto-save failed: {e}")
                self.editor.mark_save_failed()
                return False

            with self._state_lock:
                edited = revision != self._revision
            if edited:
                # Edited during the write; the re-armed timer saves again
                self.editor.save_status = SaveStatus.UNSAVED
                return True
            self.editor.mark_saved()
            logger.info("Auto-saved design")
            return True

    def close(self) -> None:
        """Stop listening and drop any pending save."""
        self.editor.remove_change_listener(self._on_change)
        with self._state_lock:
            self._cancel_locked()
