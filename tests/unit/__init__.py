"""
Unit tests.

Tests individual components in isolation; everything here runs in the
"Unit" test phase.
"""
