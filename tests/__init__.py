"""
Test suite for number-describe

Contains:
- tests/unit/          : Unit tests for individual modules
"""
