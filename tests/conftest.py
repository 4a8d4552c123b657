"""Shared pytest configuration."""

import os

# Qt widgets need a platform plugin; offscreen works without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
