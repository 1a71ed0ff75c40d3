"""Render loop, autosave scheduling, and telemetry services."""
