"""k disjoint shortest paths on a walled grid."""

__version__ = "0.1.0"
