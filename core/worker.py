"""
core/worker.py

Run whole pipeline steps off the calling thread.

A PipelineWorker wraps one PipelineSession and a single-thread executor, so
jobs run strictly one after another and the session never sees two callers
at once. A job is either a full `transform` (pad -> DFT -> spectrum) or a
full `antitransform` (inverse DFT -> normalize); its callback only ever
receives a finished result.

Cancellation is between jobs only: `request_cancel()` makes every job that
has not started yet finish with concurrent.futures.CancelledError. A job
already running always completes.
"""

import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

import numpy as np

from .session import PipelineSession

Callback = Callable[[Future], Any]


class PipelineWorker:
    def __init__(self, session: Optional[PipelineSession] = None):
        self.session = session if session is not None else PipelineSession()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fourier")
        self._cancel_event = threading.Event()

    # --- cancellation ---
    def request_cancel(self):
        """Skip every job queued before the next clear_cancel()."""
        self._cancel_event.set()

    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def clear_cancel(self):
        self._cancel_event.clear()

    # --- jobs ---
    def _run(self, step: Callable[[], Any]) -> Any:
        if self._cancel_event.is_set():
            raise CancelledError("Pipeline job cancelled before it started.")
        return step()

    def _submit(self, step: Callable[[], Any], on_done: Optional[Callback]) -> Future:
        future = self._executor.submit(self._run, step)
        if on_done is not None:
            future.add_done_callback(on_done)
        return future

    def load(self, image: np.ndarray, on_done: Optional[Callback] = None) -> Future:
        return self._submit(lambda: self.session.load(image), on_done)

    def transform(self, on_done: Optional[Callback] = None) -> Future:
        return self._submit(self.session.transform, on_done)

    def antitransform(self, on_done: Optional[Callback] = None) -> Future:
        return self._submit(self.session.antitransform, on_done)

    def shutdown(self, wait: bool = True):
        self._executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown(wait=True)
        return False
