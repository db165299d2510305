"""Schema data: record types for the supported message sets.

Modules here are declarations only; all behaviour lives in
:mod:`isoval.domain`.
"""
