"""
Party picker - tournament brackets and a spinner wheel for game nights.
"""
__version__ = "1.0.0"
