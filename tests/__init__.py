"""
Test suite for vecrect

Contains:
- tests/unit/          : Unit tests for individual modules
"""
