"""
Block style modifiers - additive CSS behavior modifiers for content blocks.
"""

__version__ = "0.1.0"
