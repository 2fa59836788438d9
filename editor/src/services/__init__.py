"""Rendering and I/O services for RunSnap."""
