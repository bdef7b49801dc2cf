"""Global parameters module for truthtab.

This module provides access to the limits and display defaults used throughout the project.
"""
from .settings import Settings, global_settings, load_settings, TRUTHTAB_DEBUG
