"""
Test fixtures for Signet tests.
"""
