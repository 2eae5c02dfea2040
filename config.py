"""Configure input data for interpolating inflection patterns."""

INFLECTIONS_FILE = "inflections.py"
"""Path to the file with inflection data, one variable per locale"""

LOCALE = "en"
"""Locale used by the interpolate, kinds and tokens commands"""

OUTPUT_DIR = "output"
"""Path to the output folder for token tables, exports and the log file"""
