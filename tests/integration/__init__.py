"""
Integration tests.

Tests that run pytest itself or cross component boundaries; everything here
runs in the "Integration" test phase.
"""
