"""Vulture whitelist — false positives that are actually used by frameworks."""

# ---------------------------------------------------------------------------
# Public API (used by consumers, not internally)
# ---------------------------------------------------------------------------
from clientip.resolver import HeaderSource

HeaderSource.get

# ---------------------------------------------------------------------------
# Error attributes (read by callers handling InvalidInputType)
# ---------------------------------------------------------------------------
_.message
_.code
