"""
pytest configuration for the color-code tests.
- Adds calc-app/ to sys.path so the flat modules import as in production.
- Keeps RESISTOR_LOG_LEVEL from the developer's shell out of the tests.
"""
import os
import sys

os.environ.pop("RESISTOR_LOG_LEVEL", None)

# Path setup
_tests_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(_tests_dir, ".."))   # calc-app/
