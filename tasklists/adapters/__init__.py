"""Adapter package for concrete port implementations.

Purpose:
    Collect implementations of domain ports that do not belong to a specific
    UI runtime: the JSON seed loader and the headless render capability.

Call context:
    Imported by app composition modules (seeding) and by tests and smoke runs
    (in-memory root and renderer).
"""
