"""
Visual theme / constants for the keypad window.

Button colouring mirrors the classic layout: white digits, orange operators,
a black '=' and red function keys.
"""
import re
from typing import Dict

from backend.keys import is_numeric, is_symbol

WINDOW_TITLE = "Calculator"
WINDOW_WIDTH = 270
WINDOW_HEIGHT = 350

BG = "#d9d9d9"
DISPLAY_BG = "#ffffff"
DISPLAY_FG = "#000000"

WHITE = "#ffffff"
BLACK = "#000000"
ORANGE = "#ffc800"
RED = "#ff0000"
DEFAULT_BTN_BG = "#e0e0e0"
DEFAULT_BTN_FG = "#000000"

BUTTON_FONT = ("Helvetica", 16)
DISPLAY_FONT = ("Helvetica", 30, "bold")
DISPLAY_WIDTH = 20  # characters

KEYPAD_ROWS = (
    ("1", "2", "3", "+"),
    ("4", "5", "6", "-"),
    ("7", "8", "9", "*"),
    ("C", "0", "=", "/"),
    ("SM", "RM", "CM", "X^2"),
)
KEYPAD_PADDING = 1

# tried in order; these themes honour per-style background colours
PREFERRED_THEMES = ("clam", "alt", "default")

_FUNCTION_KEY = re.compile(r"[A-W]")

BUTTON_COLOURS: Dict[str, Dict[str, str]] = {
    "Plain": {"bg": DEFAULT_BTN_BG, "fg": DEFAULT_BTN_FG},
    "Digit": {"bg": WHITE, "fg": BLACK},
    "Symbol": {"bg": ORANGE, "fg": DEFAULT_BTN_FG},
    "Equals": {"bg": BLACK, "fg": WHITE},
    "Function": {"bg": RED, "fg": WHITE},
}


def button_kind(label: str) -> str:
    """
    Colour group of a keypad label.
    Rules are applied in order and later ones override earlier ones.
    """
    kind = "Plain"
    if is_numeric(label):
        kind = "Digit"
    if is_symbol(label) or label == "X^2":
        kind = "Symbol"
    if label == "=":
        kind = "Equals"
    if _FUNCTION_KEY.search(label):
        kind = "Function"
    return kind


def button_style_name(label: str) -> str:
    """ttk style used by the button for this label, e.g. 'Digit.TButton'."""
    return f"{button_kind(label)}.TButton"


def button_style(label: str) -> Dict[str, str]:
    """Background/foreground colours for a keypad label."""
    return dict(BUTTON_COLOURS[button_kind(label)])
