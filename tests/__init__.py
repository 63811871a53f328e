"""
Test suite for price codec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
