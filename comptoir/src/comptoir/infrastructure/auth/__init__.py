"""Token handling."""
