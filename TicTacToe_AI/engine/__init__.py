"""Move validation."""
