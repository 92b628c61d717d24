"""
Calculator GUI

A four-function integer calculator window (Tkinter, ttk widgets).

- Read-only display at the top, right-aligned, starting at "0".
- 5 x 4 keypad underneath: digits, + - * /, =, C, and the memory keys
  SM (store), RM (recall), CM (clear) plus X^2 (square).
- Every button press hands its label and the current display text to the
  backend engine and shows whatever text comes back.

Start it through main.py, which sets up logging first.
"""

import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional

from backend.engine import CalculatorEngine
from backend.logging_config import get_logger
from frontend.theme import (
    BG, BUTTON_COLOURS, BUTTON_FONT, DISPLAY_BG, DISPLAY_FG, DISPLAY_FONT,
    DISPLAY_WIDTH, KEYPAD_PADDING, KEYPAD_ROWS, PREFERRED_THEMES, WINDOW_HEIGHT,
    WINDOW_TITLE, WINDOW_WIDTH, button_style_name,
)

log = get_logger("gui")


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self, engine: Optional[CalculatorEngine] = None):
        super().__init__()

        # Window setup
        self.title(WINDOW_TITLE)
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.configure(bg=BG)
        self.style = ttk.Style(self)
        self._apply_theme()
        self._configure_styles()

        # Backend engine instance, owned by this window only
        self.engine = engine if engine is not None else CalculatorEngine()
        self.buttons: Dict[str, ttk.Button] = {}

        self._build_display()
        self._build_keypad()
        self._center_on_screen()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # -------------------------
    # Look and feel
    # -------------------------
    def _apply_theme(self):
        """Pick the first available ttk theme. Failures are logged and ignored."""
        available = self.style.theme_names()
        for name in PREFERRED_THEMES:
            if name not in available:
                continue
            try:
                self.style.theme_use(name)
                log.debug("Using ttk theme %s", name)
                return
            except tk.TclError as e:
                log.warning("Could not apply theme %s: %s", name, e)
        log.info("No preferred theme applied, keeping %s", self.style.theme_use())

    def _configure_styles(self):
        """One ttk button style per key kind, plus the display field."""
        for kind, colours in BUTTON_COLOURS.items():
            name = f"{kind}.TButton"
            self.style.configure(name, font=BUTTON_FONT, background=colours["bg"],
                                 foreground=colours["fg"], padding=KEYPAD_PADDING)
            # keep the colour while hovered/pressed
            self.style.map(name, background=[("active", colours["bg"]), ("pressed", colours["bg"])],
                           foreground=[("active", colours["fg"]), ("pressed", colours["fg"])])

        self.style.configure("Display.TEntry", foreground=DISPLAY_FG, fieldbackground=DISPLAY_BG)
        self.style.map("Display.TEntry", fieldbackground=[("readonly", DISPLAY_BG)])

    def _center_on_screen(self):
        self.update_idletasks()
        x = (self.winfo_screenwidth() - WINDOW_WIDTH) // 2
        y = (self.winfo_screenheight() - WINDOW_HEIGHT) // 2
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}+{x}+{y}")

    # -------------------------
    # Display and keypad
    # -------------------------
    def _build_display(self):
        """Read-only accumulator display; only the engine's output is written here."""
        self.display_var = tk.StringVar(value=self.engine.display)
        self.display = ttk.Entry(self, textvariable=self.display_var, width=DISPLAY_WIDTH,
                                 font=DISPLAY_FONT, justify="right", state="readonly",
                                 style="Display.TEntry")
        self.display.pack(fill="x", side="top", padx=2, pady=(2, 10))

    def _build_keypad(self):
        """Grid of equal-sized buttons, styled by key kind."""
        keypad = tk.Frame(self, bg=BG)
        keypad.pack(fill="both", expand=True)
        for r, row in enumerate(KEYPAD_ROWS):
            for c, label in enumerate(row):
                btn = ttk.Button(keypad, text=label, style=button_style_name(label),
                                 command=lambda l=label: self.on_key(l))
                btn.grid(row=r, column=c, sticky="nsew", padx=KEYPAD_PADDING, pady=KEYPAD_PADDING)
                self.buttons[label] = btn
                keypad.grid_columnconfigure(c, weight=1)
            keypad.grid_rowconfigure(r, weight=1)

    # -------------------------
    # Key handling
    # -------------------------
    def on_key(self, label: str):
        """Pass the pressed label and the verbatim display text to the engine."""
        result = self.engine.handle_key_press(label, self.display_var.get())
        self.display_var.set(result)

    def _on_close(self):
        log.info("Calculator window closed")
        self.destroy()
