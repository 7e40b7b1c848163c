# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations
"""
Timestamp helpers for filesystem metadata.
Features
--------
- unix_to_datetime(): float seconds -> UTC datetime, sub-second part dropped.
- epoch(): the zero timestamp used by default body content.
- created_timestamp() / modified_timestamp(): float seconds from a stat result.
"""
import os
from datetime import datetime, timezone

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def unix_to_datetime(timestamp: float) -> datetime:
    """Convert float Unix seconds to a UTC datetime at one-second resolution."""
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc)


def epoch() -> datetime:
    return EPOCH


def created_timestamp(st: os.stat_result) -> float:
    """
    Creation time where the platform records one (st_birthtime),
    otherwise the inode change time.
    """
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return float(birth)
    return float(st.st_ctime)


def modified_timestamp(st: os.stat_result) -> float:
    return float(st.st_mtime)
