"""
Login accounts (read-only).
"""
