"""
Line tokenizing and typed field parsing.

Splits raw text lines into fields (and joins them back) honoring quoting,
multi-character separators and comment lines, and converts string fields to
int/float/bool values with zero-value fallbacks.
"""
