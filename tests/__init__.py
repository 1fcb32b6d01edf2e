"""Script Renderer Test Suite.

Unit tests for script classification, segmentation, style resolution and
the command-line interface.
"""
