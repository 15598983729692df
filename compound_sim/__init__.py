"""Compound Drop Simulator

A small, readable simulator for monthly-compounding contributions hit by
randomized market drops. Uses NumPy for the tranche series and for
reproducible random drop placement.
"""

__version__ = "0.1.0"
