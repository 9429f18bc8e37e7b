"""Library layout rule sets."""

from reelsort.rules.base import RuleSet
from reelsort.rules.plex import PlexRuleSet, compute_target_path

__all__ = ["RuleSet", "PlexRuleSet", "compute_target_path"]
