"""Constants for severity weights and lead status thresholds."""

from __future__ import annotations

# Weights are penalties: a site with no issues scores exactly 0.
CRITICAL_WEIGHT: int = -10
RECOMMENDED_WEIGHT: int = -3
OPTIMIZATION_WEIGHT: int = -1

# Lower bounds are inclusive: -50 is BAD, 0 is SUPER.
VERY_BAD_THRESHOLD: int = -50
BAD_THRESHOLD: int = -20
MIDDLE_THRESHOLD: int = -5
GOOD_THRESHOLD: int = 0

WORST_CATEGORIES_DEFAULT_LIMIT: int = 5
