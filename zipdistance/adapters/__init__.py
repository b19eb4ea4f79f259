"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- The distance-matrix HTTP service
- An in-memory static table for tests and offline runs
"""
