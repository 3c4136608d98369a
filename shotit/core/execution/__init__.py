"""Execution — the gate between the planner and the runners."""
