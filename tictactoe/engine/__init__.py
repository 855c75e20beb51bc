"""Engine package exposing rules, actions and state modules."""

from . import rules  # re-export for convenience

__all__ = ["rules"]
