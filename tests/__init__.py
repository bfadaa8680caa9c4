"""
Test suite for the layered matrix engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
