"""Command line interface for sensorconf."""
