"""
Utility functions used in this package.
"""
