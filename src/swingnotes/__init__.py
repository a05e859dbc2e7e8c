"""
Swing Notes Backend - Personal Note Taking API

Users sign up, log in with a bearer token, and keep private title/text notes
that only they can read, change, search or delete.
"""

__version__ = "1.0.0"
