"""
Configuration loading and validation for table defaults.

Provides a strongly typed settings object for the field separator, comment
prefix, quoting and text encoding, loaded from environment variables with
upfront validation.
"""
