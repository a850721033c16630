"""
Batch-run demo across multiple images.

For every input saves, under results/spectrum_demo_<timestamp>/<name>/:
- the padded grayscale input, the magnitude spectrum and the restored image (raw PNG)
- a side-by-side comparison figure
- parameters.txt with shapes and timings

Usage (from project root):
python -m scripts.spectrum_demo data/a.png data/b.jpg
"""

import os
import sys
import time
from datetime import datetime

from core.config import PROJECT_NAME, RESULTS_DIR
from core.errors import FourierPipelineError
from core.reconstruct import reconstruct_cropped
from core.session import PipelineSession
from io_utils.file_utils import make_result_filename, save_parameters_txt
from io_utils.image_handler import read_grayscale
from visuals.plots import compare_and_save, save_spectrum_image

# CONFIG: default inputs when none are given on the command line
IMAGES = [
    "data/sample1.png",
]

# also write the restored image cropped back to the loaded size
SAVE_CROPPED = True


def process_one_image(img_path, outdir):
    base = os.path.splitext(os.path.basename(img_path))[0]
    run_dir = os.path.join(outdir, base)
    os.makedirs(run_dir, exist_ok=True)

    session = PipelineSession()
    session.load(read_grayscale(img_path))

    t0 = time.perf_counter()
    result = session.transform()
    t1 = time.perf_counter()

    cropped = None
    if SAVE_CROPPED:
        # reconstruct a copy so the session's own antitransform still sees the spectrum
        cropped = reconstruct_cropped(session.complex_image.copy(), session.original_shape)
    restored = session.antitransform()
    t2 = time.perf_counter()

    shape = result.padded.shape
    p_pad = save_spectrum_image(result.padded, make_result_filename(PROJECT_NAME, img_path, "padded", shape, outdir=run_dir))
    p_spec = save_spectrum_image(result.spectrum, make_result_filename(PROJECT_NAME, img_path, "spectrum", shape, outdir=run_dir))
    p_rest = save_spectrum_image(restored, make_result_filename(PROJECT_NAME, img_path, "restored", shape, outdir=run_dir))
    if cropped is not None:
        save_spectrum_image(cropped, make_result_filename(PROJECT_NAME, img_path, "restored cropped", cropped.shape, outdir=run_dir))
    compare_and_save(result.padded, result.spectrum, restored,
                     out_path=os.path.join(run_dir, f"{base}_comparison.png"))

    save_parameters_txt(run_dir, {
        "input_path": img_path,
        "original_shape": session.original_shape,
        "padded_shape": shape,
        "spectrum_shape": result.spectrum.shape,
        "forward_seconds": f"{t1 - t0:.4f}",
        "inverse_seconds": f"{t2 - t1:.4f}",
        "padded_png": p_pad,
        "spectrum_png": p_spec,
        "restored_png": p_rest,
    })
    return run_dir


def main(argv=None):
    paths = (argv if argv is not None else sys.argv[1:]) or IMAGES
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    outdir = os.path.join(RESULTS_DIR, f"spectrum_demo_{timestamp}")
    os.makedirs(outdir, exist_ok=True)

    failures = 0
    for p in paths:
        try:
            run_dir = process_one_image(p, outdir)
        except (OSError, FourierPipelineError) as e:
            failures += 1
            print(f"[skip] {p}: {e}")
            continue
        print(f"[ok]   {p} -> {run_dir}")
    print(f"Done. Results in {outdir}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
