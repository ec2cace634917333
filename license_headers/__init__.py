"""
Keep copyright/license headers in source files up to date.
"""

__version__ = "0.1.0"
