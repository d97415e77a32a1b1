"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    FAILREPORT_OBJECT_FORMAT_INDENT — Spaces per nesting level in dictionary dumps (default: 2)
    FAILREPORT_LOG_LEVEL            — Log level used by the CLI (default: INFO)
    FAILREPORT_LOG_DIR              — Directory for the daily log file (default: unset, console only)

Determinism:
    Values are read once at import time. The formatters take them as
    default arguments, so a report never changes shape mid-process.
"""
import os
from dotenv import load_dotenv

load_dotenv()

OBJECT_FORMAT_INDENT = int(os.getenv("FAILREPORT_OBJECT_FORMAT_INDENT", 2))

LOG_LEVEL = os.getenv("FAILREPORT_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("FAILREPORT_LOG_DIR", "")
