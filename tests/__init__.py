"""
Test suite for the unit conversion engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
