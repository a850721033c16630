import ttkbootstrap as ttk
import tkinter as tk
from ttkbootstrap.constants import *
from tkinter import StringVar
from tkinter.scrolledtext import ScrolledText

from core.config import APP_TITLE, APP_THEME, APP_GEOMETRY
from core.worker import PipelineWorker
from .callbacks import open_image_callback, transform_callback, antitransform_callback
from .utils import png_to_tkimage


class FourierApp(ttk.Window):
    def __init__(self, title=APP_TITLE, themename=APP_THEME):
        super().__init__(themename=themename)
        self.title(title)
        self.geometry(APP_GEOMETRY)

        # Data
        self.worker = PipelineWorker()
        self.image_path = StringVar()
        # PhotoImage references must outlive the labels showing them
        self._tkimages = {}

        # Build UI
        self._build_layout()
        self.refresh_buttons()
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def log(self, msg: str):
        """
        GUI logger: append message to the ScrolledText log_box if available,
        otherwise print to stdout.
        """
        if getattr(self, "log_box", None) is None:
            print(str(msg))
            return
        self.log_box.insert("end", str(msg) + "\n")
        self.log_box.see("end")

    # --- Layout ---
    def _build_layout(self):
        control = ttk.Frame(self)
        control.pack(side=LEFT, fill=Y, padx=10, pady=10)

        self.load_btn = ttk.Button(control, text="Load Image", bootstyle=PRIMARY,
                                   command=lambda: open_image_callback(self))
        self.load_btn.pack(fill=X, pady=3)
        self.transform_btn = ttk.Button(control, text="Apply DFT", bootstyle=SUCCESS,
                                        command=lambda: transform_callback(self))
        self.transform_btn.pack(fill=X, pady=3)
        self.antitransform_btn = ttk.Button(control, text="Apply Inverse DFT", bootstyle=INFO,
                                            command=lambda: antitransform_callback(self))
        self.antitransform_btn.pack(fill=X, pady=3)

        ttk.Separator(control).pack(fill=X, pady=5)
        ttk.Label(control, text="Logs:").pack(anchor=W)
        self.log_box = ScrolledText(control, height=15, width=36, wrap="word")
        self.log_box.configure(font=("Helvetica", 10))
        self.log_box.pack(fill=BOTH, expand=True, pady=5)

        display = ttk.Frame(self)
        display.pack(side=LEFT, fill=BOTH, expand=True, padx=(8, 12), pady=8)

        self.views = {}
        for key, caption in (("original", "Original"),
                             ("transformed", "Magnitude Spectrum"),
                             ("antitransformed", "Restored")):
            col = ttk.Frame(display)
            col.pack(side=LEFT, fill=BOTH, expand=True, padx=4)
            ttk.Label(col, text=caption).pack(anchor=N)
            view = tk.Label(col, background="black")
            view.pack(fill=BOTH, expand=True)
            self.views[key] = view

    # --- state-driven affordances ---
    def refresh_buttons(self):
        session = self.worker.session
        self.load_btn.configure(state="normal")
        self.transform_btn.configure(state="normal" if session.can_transform else "disabled")
        self.antitransform_btn.configure(state="normal" if session.can_antitransform else "disabled")

    def set_busy(self):
        for btn in (self.load_btn, self.transform_btn, self.antitransform_btn):
            btn.configure(state="disabled")

    # --- views ---
    def _show(self, key, png_bytes):
        tkimg = png_to_tkimage(png_bytes)
        self._tkimages[key] = tkimg
        self.views[key].configure(image=tkimg)

    def _clear(self, key):
        self._tkimages.pop(key, None)
        self.views[key].configure(image="")

    def show_original(self, png_bytes):
        self._show("original", png_bytes)

    def show_transformed(self, png_bytes):
        self._show("transformed", png_bytes)

    def show_antitransformed(self, png_bytes):
        self._show("antitransformed", png_bytes)

    def clear_results(self):
        self._clear("transformed")
        self._clear("antitransformed")

    def _on_close(self):
        self.worker.request_cancel()
        self.worker.shutdown(wait=False)
        self.destroy()


def launch_app():
    app = FourierApp()
    app.mainloop()
