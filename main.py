#!/usr/bin/env python3
"""
Entry point for the Calculator application.

Run from the project root:

    python main.py
"""
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so the backend/frontend packages import
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.logging_config import setup_logging
from frontend.gui import CalculatorGUI


def main():
    setup_logging()
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
