"""Shared utilities for Script Renderer."""
