"""
Shared runtime state module.

Holds the process-wide prediction mode selection behind a lock.
"""
