"""
Staged change collection and exclude-rule filtering.
"""

from .change_collector import ChangeCollector, StagedChangeSet, filter_excluded  # noqa: F401
