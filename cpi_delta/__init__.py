"""
CPI Delta - Price Index Change Calculator

Loads a monthly price-index (CPI) series from delimited text, computes the
percentage change between a start and end month, and rebases the selected
window so every point is expressed relative to the first observation.
"""

__version__ = "0.1.0"
__author__ = "CPI Delta Team"
