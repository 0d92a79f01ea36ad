"""
AI queries over the level grid.

AIController answers edge validity, reachability and path requests; AICell
is the per-coordinate record it stores in the grid.
"""

# This file can be used to expose public interfaces from this package
