"""WasteProof command line interface."""
from wasteproof import __version__

__all__ = ["__version__"]
