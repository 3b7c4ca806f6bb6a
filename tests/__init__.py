"""
Test suite for numtower

Contains:
- tests/unit/          : Unit tests for individual modules
"""
