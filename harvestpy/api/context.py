"""Cancellable execution contexts for API calls.

A Context carries a cancellation signal and an optional deadline. Every call
made through the client takes one; a cancelled or expired context stops the
call and its error is reported instead of whatever the transport raised.

    ctx = Context.with_timeout(Context.background(), 10)
    entries, resp = client.time_entries.list(ctx)
"""
import threading
import time
from typing import List, Optional, Type

from .errors import Canceled, ContextError, DeadlineExceeded


class Context:
    """A cancellation signal with an optional deadline, safe to share between threads."""

    def __init__(self, parent: Optional["Context"] = None, deadline: Optional[float] = None):
        """Initialize a Context.

        Args:
            parent: Context whose cancellation also cancels this one (optional)
            deadline: Absolute ``time.monotonic()`` deadline (optional)
        """
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self.deadline = deadline
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._err: Optional[Type[ContextError]] = None
        self._children: List["Context"] = []
        self._parent = parent
        if parent is not None:
            parent._attach(self)

    @classmethod
    def background(cls) -> "Context":
        """Return a context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_cancel(cls, parent: "Context") -> "Context":
        """Derive a context that is cancelled by calling its ``cancel()``."""
        return cls(parent)

    @classmethod
    def with_deadline(cls, parent: "Context", deadline: float) -> "Context":
        """Derive a context that expires at a ``time.monotonic()`` instant."""
        return cls(parent, deadline)

    @classmethod
    def with_timeout(cls, parent: "Context", seconds: float) -> "Context":
        """Derive a context that expires after the given number of seconds."""
        return cls(parent, time.monotonic() + seconds)

    def _attach(self, child: "Context") -> None:
        with self._lock:
            if self._err is None:
                self._children.append(child)
                return
            err = self._err
        child._finish(err)

    def _detach(self, child: "Context") -> None:
        with self._lock:
            if child in self._children:
                self._children.remove(child)

    def _finish(self, err: Type[ContextError]) -> None:
        with self._lock:
            if self._err is not None:
                return
            self._err = err
            children, self._children = self._children, []
            self._done.set()
        for child in children:
            child._finish(err)
        if self._parent is not None:
            self._parent._detach(self)

    def cancel(self) -> None:
        """Cancel this context and every context derived from it. Idempotent."""
        self._finish(Canceled)

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without one."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def err(self) -> Optional[ContextError]:
        """Return why the context is done, or None while it is still live.

        Each call builds a fresh exception so it can be raised more than once.
        """
        if self._err is None and self.deadline is not None and time.monotonic() >= self.deadline:
            self._finish(DeadlineExceeded)
        return self._err() if self._err is not None else None

    def done(self) -> bool:
        return self.err() is not None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the context is done or the timeout elapses."""
        end = None if timeout is None else time.monotonic() + timeout
        while not self.done():
            limit = self.remaining()
            if end is not None:
                left = end - time.monotonic()
                if left <= 0:
                    return False
                limit = left if limit is None else min(limit, left)
            self._done.wait(limit)
        return True

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()
