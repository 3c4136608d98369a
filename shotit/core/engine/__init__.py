"""Engine — the planner and its reporting hooks."""
