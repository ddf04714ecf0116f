# /// script
# requires-python = ">=3.12"
# dependencies = ["ffbuild"]
#
# [tool.uv.sources]
# ffbuild = { path = "../" }
# ///
"""
Build the minimal universal ffmpeg and copy it into macos/Runner/Resources.

Run from the app repository root:
  uv run scripts/macos-build-ffmpeg.py --verify
  IDENTITY="Developer ID Application: Your Name (XX9X9X9XX9)" uv run scripts/macos-build-ffmpeg.py --sign --verify
"""

import sys

from ffbuild.cli import main

if __name__ == "__main__":
    sys.exit(main())
