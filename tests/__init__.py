"""
Test suite for slider-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
