"""
Records API backend package.
"""
