"""
Test suite for baseconv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
