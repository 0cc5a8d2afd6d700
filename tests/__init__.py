"""
Test suite for optionkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
