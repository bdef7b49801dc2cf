"""Translators from truthtab formulas to other reasoning tools."""
