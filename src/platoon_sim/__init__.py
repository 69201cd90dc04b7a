"""Turn-based platoon battle simulation core."""
