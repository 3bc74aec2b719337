"""Lead scoring and status classification for analyzed websites."""

from __future__ import annotations

__version__ = "0.1.0"
