"""
Test suite for the storefront client data layer

Contains:
- tests/unit/          : Unit tests for individual modules (no network access)
"""
