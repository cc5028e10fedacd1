"""Graph views of a lattice.

This package provides conversion of a `Lattice` into NetworkX graphs
(`convert`) for cross-checking and external analysis.
"""
