"""Shared utilities for truthtab."""
