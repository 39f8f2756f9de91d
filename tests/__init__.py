"""
Test suite for custom-base-codec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
