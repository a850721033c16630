import os
import matplotlib
matplotlib.use("Agg")
import numpy as np
from core.fft_engine import forward_transform
from visuals.plots import save_spectrum_image, plot_magnitude_spectrum, compare_and_save, fig_to_array
from io_utils.image_handler import read_grayscale

def test_plot_spectrum_raw_png(tmp_path):
    img = (np.random.rand(16, 16) * 255).astype(np.uint8)
    cimg = forward_transform(img)
    spec = plot_magnitude_spectrum(cimg)
    assert spec.shape == (16, 16)
    p = str(tmp_path / "spec" / "spec.png")
    assert plot_magnitude_spectrum(cimg, out_path=p) == p
    assert np.array_equal(read_grayscale(p), spec)

def test_save_spectrum_image(tmp_path):
    arr = np.arange(64, dtype=np.uint8).reshape(8, 8)
    p = str(tmp_path / "raw.png")
    assert save_spectrum_image(arr, p) == p
    assert os.path.exists(p)

def test_compare_and_save(tmp_path):
    orig = np.zeros((32, 32), dtype=np.uint8)
    spec = np.ones((32, 32), dtype=np.uint8) * 10
    restored = np.ones((32, 32), dtype=np.uint8) * 20
    pm = str(tmp_path / "cmp.png")
    assert compare_and_save(orig, spec, restored, out_path=pm) == pm
    assert os.path.exists(pm)

def test_compare_figure_to_array():
    orig = np.zeros((8, 8), dtype=np.uint8)
    fig = compare_and_save(orig, orig)
    arr = fig_to_array(fig)
    assert arr.ndim == 3 and arr.shape[2] == 3
    assert arr.dtype == np.uint8
