"""Routing — bidirectional route tables with O(path-depth) matching.

Routes are registered during setup and frozen into read-only lookup
structures before the first lookup.
"""
