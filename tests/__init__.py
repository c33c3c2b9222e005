"""
Test suite for MAG Rewards

Contains:
- tests/unit/          : Unit tests for individual modules
"""
