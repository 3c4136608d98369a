"""Resolver — choose what to run on this system."""
