"""Space Empire: a small turn-based galaxy simulation."""
