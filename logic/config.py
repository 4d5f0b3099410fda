"""
Configuration management module.

This module reads the runtime settings of the camp dashboard from the
environment. Values can be placed in a .env file, which main.py loads
before anything else is imported.

Date: 2026-10-19
"""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DATA_DIR = os.getenv("CAMP_DATA_DIR", os.path.join(BASE_DIR, "data"))
PUBLIC_DIR = os.path.join(BASE_DIR, "public")

WEATHER_URL = os.getenv("WEATHER_URL", "https://wttr.in/{location}?format=j1")
WEATHER_TIMEOUT = float(os.getenv("WEATHER_TIMEOUT", "10"))

ACTIVITY_LIMIT = int(os.getenv("ACTIVITY_LIMIT", "50"))
DEFAULT_PIN = os.getenv("DEFAULT_PIN", "0000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
