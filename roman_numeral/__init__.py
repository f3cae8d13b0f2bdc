"""
Roman Numeral: Standard-form Roman numerals as a strict value type.

Architecture: Formatter + Parser/Validator → RomanNumeral value type → Checked arithmetic
Philosophy:  One canonical spelling per number. Anything else is rejected, never guessed.
"""

__version__ = "1.0.0"
