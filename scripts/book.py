#!/usr/bin/env python3
"""Book pipeline: Markdown manuscript to print-ready PDF.

Manuscript → preprocessing → HTML → chapter batches → Chromium passes → merge & page numbers.

Usage:
    uv run python scripts/book.py
    uv run python scripts/book.py -i drafts/book.md -o output/book.pdf
    uv run python scripts/book.py --chrome /usr/bin/chromium

Configuration:
    Edit scripts/configs/book.py (title, author, batching, trim size)
    and scripts/configs/common.py (manuscript/output paths, Chromium location).
"""

import argparse
import logging
import os
import sys
import time

logging.getLogger("asyncio").setLevel(logging.ERROR)
from datetime import datetime
from pathlib import Path

# Add src/ to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from configs.book import CHROME_EXECUTABLE, OUTPUT_PATH, SOURCE_PATH, config  # noqa: E402
from configs.common import TeeLogger, fmt_time  # noqa: E402

from book import build_book  # noqa: E402

parser = argparse.ArgumentParser(description="Book pipeline: Markdown manuscript to PDF")
parser.add_argument(
    "--input", "-i", default=SOURCE_PATH,
    help=f"Markdown manuscript (default: {SOURCE_PATH})",
)
parser.add_argument(
    "--output", "-o", default=OUTPUT_PATH,
    help=f"Output PDF (default: {OUTPUT_PATH})",
)
parser.add_argument(
    "--chrome", default=CHROME_EXECUTABLE,
    help="Chromium/Chrome executable (default: system Chrome if present, else Playwright's build)",
)
args = parser.parse_args()

output_dir = os.path.dirname(os.path.abspath(args.output))
os.makedirs(output_dir, exist_ok=True)
log_path = os.path.join(output_dir, f"book_run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
sys.stdout = TeeLogger(log_path)

print("=" * 60)
print(f"Input: {args.input}")
print(f"Output: {args.output}")
print(f"Browser: {args.chrome or 'Playwright Chromium'}")
layout = config.layout
print(f"Trim size: {layout.width} x {layout.height}")
print(f"Chapters per batch: {config.batching.chapters_per_batch}")

t0 = time.time()
try:
    build_book(args.input, args.output, config, executable_path=args.chrome)
except (OSError, RuntimeError, ValueError) as e:  # RenderError is a RuntimeError
    print(f"ERROR: {e}")
    sys.exit(1)

print(f"\nCompleted in {fmt_time(time.time() - t0)}")
print(f"Run log: {log_path}")
