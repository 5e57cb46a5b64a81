"""
Core domain models, contracts, and data primitives.

This module contains the foundational building blocks that are independent
of external systems (HTTP APIs, worker threads, etc.).
"""
