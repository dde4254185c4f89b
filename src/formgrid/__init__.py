"""formgrid — grid layout resolution for hierarchical forms."""

__version__ = "0.3.0"
