"""Runners — the only code that touches processes."""
