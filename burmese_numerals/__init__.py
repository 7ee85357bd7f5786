"""
Burmese Numerals: integers to Burmese numeral words and back.

Architecture: Place-value table → Forward converter (+ shorthand) / Reverse parser → Validator
Philosophy:  Both directions read the same table. Failures are classified, never thrown at the caller.
"""

__version__ = "1.0.0"
