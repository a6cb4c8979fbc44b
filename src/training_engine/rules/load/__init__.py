"""Training load rules: volume, intensity and recovery."""
