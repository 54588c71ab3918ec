"""
In-memory table model: rows of string fields with typed access.

Holds the Row and Table classes, load/save orchestration over a TextStore,
and conversions to pandas DataFrames and numpy arrays.
"""
