"""Adapters that connect the core ports to files and text streams."""
