"""
Shared service utilities.

- http.py - ``requests`` session (single attempt, default timeout)
"""
