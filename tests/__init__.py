"""
Test suite for generic-arithmetic

Contains:
- tests/unit/          : Unit tests for individual modules
"""
