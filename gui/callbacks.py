import os
from concurrent.futures import Future
from tkinter import filedialog, messagebox

from core.errors import FourierPipelineError
from io_utils.image_handler import read_grayscale, encode_png

POLL_MS = 30


# ----------------------
# Logging helper
# ----------------------
def _safe_log(app, *args, **kwargs):
    """Try to write to app.log if present, otherwise print to stdout."""
    msg = " ".join(str(a) for a in args) if args else kwargs.get("msg", "")
    try:
        if hasattr(app, "log") and callable(getattr(app, "log")):
            app.log(msg)
        else:
            print(msg)
    except Exception:
        print(msg)


def _when_done(app, future: Future, on_result, what: str):
    """
    Poll `future` from the Tk event loop and hand its result to on_result
    on the main thread. Worker threads never touch widgets.
    """
    if not future.done():
        app.after(POLL_MS, _when_done, app, future, on_result, what)
        return
    try:
        result = future.result()
    except FourierPipelineError as e:
        _safe_log(app, f"{what} refused: {e}")
        messagebox.showwarning(what, str(e))
    except Exception as e:
        _safe_log(app, f"{what} failed: {e}")
        messagebox.showerror(what, f"{what} failed:\n{e}")
    else:
        on_result(result)
    finally:
        app.refresh_buttons()


# ----------------------
# Callbacks
# ----------------------
def open_image_callback(app):
    """Pick a file, load it as grayscale and start a fresh session cycle."""
    path = filedialog.askopenfilename(
        title="Select Image",
        filetypes=[("Image Files", "*.png *.jpg *.jpeg *.tif *.bmp *.gif *.avif"), ("All Files", "*.*")]
    )
    if not path:
        return

    try:
        gray = read_grayscale(path)
    except (OSError, ValueError) as e:
        _safe_log(app, f"Could not read {path}: {e}")
        messagebox.showerror("Open Image", f"Could not read image:\n{e}")
        return

    def _loaded(_):
        app.show_original(encode_png(gray))
        app.clear_results()
        _safe_log(app, f"Loaded: {os.path.basename(path)} shape={gray.shape}")

    app.image_path.set(path)
    _when_done(app, app.worker.load(gray), _loaded, "Open Image")


def transform_callback(app):
    """Forward DFT of the loaded image; shows the magnitude spectrum."""
    if not app.worker.session.can_transform:
        return
    _safe_log(app, "Computing DFT ...")
    app.set_busy()

    def _done(result):
        app.show_transformed(encode_png(result.spectrum))
        _safe_log(app, f"DFT done (padded to {result.padded.shape[1]}x{result.padded.shape[0]}).")

    _when_done(app, app.worker.transform(), _done, "Transform")


def antitransform_callback(app):
    """Inverse DFT of the stored spectrum; shows the restored image."""
    if not app.worker.session.can_antitransform:
        return
    _safe_log(app, "Computing inverse DFT ...")
    app.set_busy()

    def _done(restored):
        app.show_antitransformed(encode_png(restored))
        _safe_log(app, "Inverse DFT done.")

    _when_done(app, app.worker.antitransform(), _done, "Antitransform")
