import threading
from concurrent.futures import CancelledError
import numpy as np
import pytest
from core.errors import PreconditionViolation
from core.session import SessionState
from core.worker import PipelineWorker

def _img():
    return (np.random.rand(12, 10) * 255).astype(np.uint8)

def test_worker_runs_full_pipeline():
    with PipelineWorker() as w:
        w.load(_img()).result(timeout=10)
        result = w.transform().result(timeout=10)
        restored = w.antitransform().result(timeout=10)
    assert result.spectrum.dtype == np.uint8
    assert restored.shape == result.padded.shape
    assert w.session.state is SessionState.RECONSTRUCTED

def test_worker_callback_gets_finished_result():
    got = {}
    done = threading.Event()

    def on_done(fut):
        got["spectrum"] = fut.result().spectrum
        done.set()

    with PipelineWorker() as w:
        w.load(_img())
        w.transform(on_done=on_done)
        assert done.wait(timeout=10)
    assert got["spectrum"].shape == (12, 10)

def test_worker_propagates_precondition_violation():
    with PipelineWorker() as w:
        fut = w.antitransform()
        with pytest.raises(PreconditionViolation):
            fut.result(timeout=10)

def test_worker_cancel_skips_queued_jobs():
    with PipelineWorker() as w:
        w.load(_img()).result(timeout=10)
        w.request_cancel()
        fut = w.transform()
        with pytest.raises(CancelledError):
            fut.result(timeout=10)
        assert w.session.state is SessionState.LOADED
        w.clear_cancel()
        assert not w.is_cancelled()
        w.transform().result(timeout=10)
        assert w.session.state is SessionState.TRANSFORMED
