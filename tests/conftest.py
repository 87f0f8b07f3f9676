# tests/conftest.py
"""Keep test runs from writing log files into the working directory."""

import os

os.environ.setdefault("LOG_TO_FILE", "false")
