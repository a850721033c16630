import numpy as np
import pytest
from core.errors import InvalidDimensions, PreconditionViolation
from core.session import PipelineSession, SessionState

def _img(shape=(5, 7)):
    return (np.random.rand(*shape) * 255).astype(np.uint8)

def test_initial_state_is_empty():
    s = PipelineSession()
    assert s.state is SessionState.EMPTY
    assert not s.can_transform
    assert not s.can_antitransform
    assert s.complex_image is None

def test_transform_without_image_raises():
    with pytest.raises(PreconditionViolation):
        PipelineSession().transform()

def test_antitransform_without_transform_raises():
    s = PipelineSession()
    with pytest.raises(PreconditionViolation):
        s.antitransform()
    s.load(_img())
    with pytest.raises(PreconditionViolation):
        s.antitransform()

def test_full_cycle():
    s = PipelineSession()
    s.load(_img((5, 7)))
    assert s.state is SessionState.LOADED
    assert s.can_transform and not s.can_antitransform

    result = s.transform()
    assert s.state is SessionState.TRANSFORMED
    assert result.padded.shape == (5, 8)
    assert result.spectrum.shape == (4, 8)
    assert result.spectrum.dtype == np.uint8
    assert s.complex_image.shape == (5, 8)
    assert not s.can_transform and s.can_antitransform

    restored = s.antitransform()
    assert s.state is SessionState.RECONSTRUCTED
    assert restored.shape == (5, 8)
    assert not s.can_transform and not s.can_antitransform

def test_transform_twice_on_same_image_refused():
    s = PipelineSession()
    s.load(_img())
    s.transform()
    with pytest.raises(PreconditionViolation):
        s.transform()

def test_antitransform_twice_refused():
    s = PipelineSession()
    s.load(_img())
    s.transform()
    s.antitransform()
    with pytest.raises(PreconditionViolation):
        s.antitransform()

@pytest.mark.parametrize("steps", [0, 1, 2])
def test_load_resets_from_any_state(steps):
    s = PipelineSession()
    s.load(_img())
    if steps >= 1:
        s.transform()
    if steps >= 2:
        s.antitransform()
    s.load(_img((4, 4)))
    assert s.state is SessionState.LOADED
    assert s.complex_image is None
    assert s.original_shape == (4, 4)
    assert s.can_transform and not s.can_antitransform

def test_each_transform_creates_fresh_complex_image():
    s = PipelineSession()
    s.load(_img())
    s.transform()
    first = s.complex_image
    s.load(_img())
    s.transform()
    assert s.complex_image is not first

def test_load_rejects_invalid_image_and_keeps_state():
    s = PipelineSession()
    s.load(_img())
    s.transform()
    with pytest.raises(InvalidDimensions):
        s.load(np.zeros((0, 4), dtype=np.uint8))
    with pytest.raises(InvalidDimensions):
        s.load(np.zeros((4, 4, 3), dtype=np.uint8))
    assert s.state is SessionState.TRANSFORMED

def test_load_converts_float_to_uint8():
    s = PipelineSession()
    s.load(np.array([[0.4, 254.6], [300.0, -3.0]]))
    assert s.image.dtype == np.uint8
    assert s.image.tolist() == [[0, 255], [255, 0]]

def test_load_copies_input():
    img = _img()
    s = PipelineSession()
    s.load(img)
    img[0, 0] = 0 if img[0, 0] else 1
    assert s.image[0, 0] != img[0, 0]

def test_reset():
    s = PipelineSession()
    s.load(_img())
    s.transform()
    s.reset()
    assert s.state is SessionState.EMPTY
    assert s.image is None and s.complex_image is None
