# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations
"""
Utility package for n4.
Exports:
- fs: extension swaps, web/local path mapping with root guards, text I/O
- time: stat timestamps -> UTC datetimes
- text: markdown -> HTML
"""
from . import fs as fs  # re-export
from . import text as text  # re-export
from . import time as time  # re-export
__all__ = ["fs", "text", "time"]
