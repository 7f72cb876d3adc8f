"""
Settings and configuration for ainconv.

Values are read from the environment once, at import time.
"""

import os

# Debug mode
DEBUG = os.environ.get("AINCONV_DEBUG", "").lower() in ("1", "true", "yes")

# Target script used by the command line when --to is not given
DEFAULT_TARGET = os.environ.get("AINCONV_DEFAULT_TARGET", "Kana")
