"""
CalcKit - unit converters and algebra calculators.
"""

__version__ = "0.1.0"
