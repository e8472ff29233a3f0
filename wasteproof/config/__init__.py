"""Configuration subpackage: feature flags."""
from . import features

__all__ = ["features"]
