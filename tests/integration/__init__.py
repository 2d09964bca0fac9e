"""Integration tests for themectl.

These tests load real theme files from disk, through the catalog API and the
command-line interface.
"""
