"""
Three Men's Morris
==================
A two-player placement-and-movement game on a 3x3 grid.
Each player places 3 pieces, then moves them one at a time to empty
cells. The first to line up three in a row wins.

Turn order: X -> O -> X -> O ...
"""

__version__ = "1.0.0"
