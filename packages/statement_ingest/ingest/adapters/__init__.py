"""Per-format adapters: raw statement text to canonical records."""
