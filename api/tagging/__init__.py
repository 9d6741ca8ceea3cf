"""
Event <-> person and event <-> image tagging.
"""
