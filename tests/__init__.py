"""
Test suite for apfloat

Contains:
- tests/unit/          : Unit tests for individual modules
"""
