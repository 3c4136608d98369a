"""Use cases — one function per CLI mode."""
