"""
Text storage abstractions for loading and saving CSV documents.

Defines the TextStore protocol that Table depends on for reading and writing
whole documents, and the local-filesystem implementation used by default.
"""
