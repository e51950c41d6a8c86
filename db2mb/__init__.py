"""Convert Decked Builder collection exports to ManaBox imports."""

__version__ = "0.1.0"
