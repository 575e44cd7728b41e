"""Test fixtures for storeclient.

This package provides reusable test fixtures:
- stores: offline stub servers and clients wired to them
- suite: captured-value store shared by the steps of a live suite
"""
