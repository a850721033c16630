import io
from PIL import Image, ImageTk

from core.config import PREVIEW_FIT_WIDTH


def png_to_tkimage(data: bytes, fit_width: int = PREVIEW_FIT_WIDTH):
    """Decode PNG bytes into a PhotoImage scaled to `fit_width`, keeping the aspect ratio."""
    img = Image.open(io.BytesIO(data))
    w, h = img.size
    if w != fit_width:
        new_h = max(1, int(round(h * fit_width / float(w))))
        img = img.resize((fit_width, new_h), Image.BILINEAR)
    return ImageTk.PhotoImage(img)
