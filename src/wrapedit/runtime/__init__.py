"""Logging and profiling services."""
