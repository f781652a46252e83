"""
Institution lab - orders a fixed collection of educational institutions and searches it.
"""

__version__ = "1.0.0"
