"""
Caret repair: keep the edit cursor inside the numeric region of the field.

The host re-renders the field text after every edit, which moves the caret
to wherever the toolkit leaves it, often after the suffix. Repair runs once
per change/focus event, deferred until the host has committed the new text,
and collapses the selection right before the suffix.

The host supplies the deferral primitive through a `Scheduler`:

    - `DeferredQueue`: the host calls `run_pending()` from its after-render hook
    - `AsyncioScheduler`: `loop.call_soon()` on an asyncio event loop
"""

# Standard library -----------------------------------------------------------------------------------------------------
import asyncio
import logging
from collections import deque
from typing import Any, Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class SelectionTarget(Protocol):
    """Field element: current text and a settable selection range."""

    value: str

    def set_selection_range(self, start: int, end: int) -> Any: ...


@runtime_checkable
class FieldEvent(Protocol):
    """Change/focus event carrying its field; persist() keeps it valid past the current dispatch."""

    target: SelectionTarget

    def persist(self) -> Any: ...


class Handle(Protocol):
    def cancel(self) -> Any: ...


@runtime_checkable
class Scheduler(Protocol):
    """Runs a callback after the host finished its current update pass."""

    def schedule(self, callback: Callable[[], Any]) -> Handle: ...


class DeferredHandle:
    """Pending entry of a DeferredQueue."""

    __slots__ = ("callback", "cancelled")

    def __init__(self, callback: Callable[[], Any]):
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"<{type(self).__name__} {state} {self.callback!r}>"


class DeferredQueue:
    """
    FIFO of callbacks run on demand by the host.

    Call `run_pending()` once the field text is committed, e.g. from a
    post-render hook or a zero-delay timer of the UI toolkit.

    Examples:
        >>> queue = DeferredQueue()
        >>> handle = queue.schedule(lambda: print("repair"))
        >>> queue.run_pending()
        repair
        1
    """

    def __init__(self):
        self._queue: deque[DeferredHandle] = deque()

    def schedule(self, callback: Callable[[], Any]) -> DeferredHandle:
        handle = DeferredHandle(callback)
        self._queue.append(handle)
        return handle

    def run_pending(self) -> int:
        """
        Run callbacks queued so far, in order, skipping cancelled ones.

        Callbacks scheduled while running wait for the next call.

        Returns:
            Number of callbacks run.
        """
        count = 0
        for _ in range(len(self._queue)):
            handle = self._queue.popleft()
            if handle.cancelled:
                continue
            handle.callback()
            count += 1
        return count

    def __len__(self) -> int:
        return sum(1 for handle in self._queue if not handle.cancelled)


class AsyncioScheduler:
    """
    Scheduler running callbacks on the next iteration of an asyncio loop.

    Without an explicit loop, the loop running at scheduling time is used;
    scheduling outside a running loop raises RuntimeError.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop

    def schedule(self, callback: Callable[[], Any]) -> asyncio.Handle:
        loop = self.loop if self.loop is not None else asyncio.get_running_loop()
        return loop.call_soon(callback)


class CaretRepair:
    """
    Event handler scheduling one deferred caret fix per usable event.

    Events without a target, or whose target has no callable
    `set_selection_range`, are ignored.

    Examples:
        >>> queue = DeferredQueue()
        >>> repair = CaretRepair(suffix=" USD", scheduler=queue)
        >>> repair(event)           # event.target.value == "$1,234 USD"
        >>> queue.run_pending()     # event.target.set_selection_range(6, 6)
        1
    """

    def __init__(self, suffix: str, scheduler: Scheduler):
        self.suffix = suffix
        self.scheduler = scheduler
        self._pending: set = set()

    def __call__(self, event: FieldEvent | None) -> None:
        target = getattr(event, "target", None)
        if target is None or not callable(getattr(target, "set_selection_range", None)):
            logger.debug("caret repair skipped, no selectable target on %r", event)
            return

        persist = getattr(event, "persist", None)
        if callable(persist):
            persist()

        handle = None

        def repair() -> None:
            self._pending.discard(handle)
            offset = caret_offset(getattr(target, "value", ""), self.suffix)
            target.set_selection_range(offset, offset)

        handle = self.scheduler.schedule(repair)
        self._pending.add(handle)
        logger.debug("caret repair scheduled for %r", target)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def cancel_pending(self) -> int:
        """Cancel repairs not yet run, e.g. when the field is torn down. Returns how many were cancelled."""
        handles = list(self._pending)
        self._pending.clear()
        for handle in handles:
            handle.cancel()
        return len(handles)


# Methods --------------------------------------------------------------------------------------------------------------

def caret_offset(text: str | None, suffix: str) -> int:
    """
    Caret position right after the numeric content, before the suffix.

    Equals len(sign) + len(prefix) + len(number) for text rendered by the
    mask. Text that lost its suffix puts the caret at the end.

    Examples:
        >>> caret_offset("prefix 1@,.1,234.56789" + "1@,. suffix", "1@,. suffix")
        22
        >>> caret_offset("12 kg", " kg")
        2
    """
    text = text or ""
    if suffix and text.endswith(suffix):
        return len(text) - len(suffix)
    return len(text)
