"""Shared configuration: paths, browser location and run helpers."""

import os
import sys
from pathlib import Path

# Add src/ to Python path (needed before importing the book.* dataclasses)
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "src"))

# --- Paths ---
PROJECT_DIR = Path(__file__).resolve().parent.parent.parent
SOURCE_PATH = str(PROJECT_DIR.parent / "building-microservices-fullstack-v2.md")
OUTPUT_PATH = str(PROJECT_DIR.parent / "building-microservices-fullstack.pdf")

# --- Browser ---
# None = the Chromium build installed by `playwright install chromium`
SYSTEM_CHROME = "/usr/bin/google-chrome"
CHROME_EXECUTABLE = SYSTEM_CHROME if os.path.exists(SYSTEM_CHROME) else None


def fmt_time(seconds):
    """Format seconds as HH:MM:SS."""
    h, remainder = divmod(int(seconds), 3600)
    m, s = divmod(remainder, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


class TeeLogger:
    """Duplicate stdout to a log file."""
    def __init__(self, log_path):
        self.terminal = sys.stdout
        self.log = open(log_path, "a", buffering=1)  # noqa: SIM115
    def write(self, msg):
        self.terminal.write(msg)
        self.log.write(msg)
    def flush(self):
        self.terminal.flush()
        self.log.flush()
