import os
import numpy as np
import pytest
from PIL import Image
from core.errors import InvalidDimensions
from io_utils.image_handler import read_grayscale, decode_grayscale, encode_png, save_image
from io_utils.file_utils import make_result_filename, save_parameters_txt

def test_encode_png_is_lossless():
    arr = np.arange(100).reshape(10, 10).astype(np.uint8)
    data = encode_png(arr)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    out = decode_grayscale(data)
    assert out.dtype == np.uint8
    assert np.array_equal(out, arr)

def test_encode_png_rejects_color():
    with pytest.raises(InvalidDimensions):
        encode_png(np.zeros((4, 4, 3), dtype=np.uint8))

def test_save_and_read_roundtrip(tmp_path):
    arr = np.arange(100).reshape(10, 10).astype(np.uint8)
    p = tmp_path / "test.png"
    save_image(str(p), arr)
    out = read_grayscale(str(p))
    assert out.shape == arr.shape
    assert np.array_equal(out, arr)

def test_read_rgb_as_grayscale(tmp_path):
    arr = np.zeros((6, 8, 3), dtype=np.uint8)
    arr[..., 1] = 200
    p = tmp_path / "rgb.png"
    Image.fromarray(arr).save(p)
    out = read_grayscale(str(p))
    assert out.shape == (6, 8)
    assert out.dtype == np.uint8
    assert np.all(out > 0)

def test_read_image_alpha(tmp_path):
    arr = np.zeros((10, 10, 4), dtype=np.uint8)
    arr[..., :3] = 255
    p = tmp_path / "rgba.png"
    Image.fromarray(arr).save(p)
    out = read_grayscale(str(p))
    assert out.shape == (10, 10)
    # fully transparent white flattens onto black
    assert np.all(out == 0)

def test_result_filename_and_parameters(tmp_path):
    name = make_result_filename("fourier", "/data/cat.png", "spectrum", (4, 6), outdir=str(tmp_path))
    assert os.path.dirname(name) == str(tmp_path)
    assert os.path.basename(name).startswith("fourier_cat_spectrum_6x4_")
    assert name.endswith(".png")
    p = save_parameters_txt(str(tmp_path), {"padded_shape": (4, 6)})
    with open(p, encoding="utf-8") as f:
        assert f.read() == "padded_shape: (4, 6)\n"
