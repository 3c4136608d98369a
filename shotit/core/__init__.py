"""Core — models, configuration, detection, execution and the planner."""
