"""
Football fixtures, live scores and league tables in the terminal.
"""

__version__ = "1.0.0"
