"""Routing — segment matching, pattern composition, and sibling selection.

Every function here is pure: results depend only on the path string and
the declaration tree passed in, and no state survives between calls.
"""
