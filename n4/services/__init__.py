# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
import os

__all__ = [
    "scanner",
    "metadata_store",
    "menu_service",
    "sitemap_service",
    "content_service",
]

# Lightweight, consistent logger for the service layer
_level = os.getenv("N4_LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("n4.services")
