"""Configuration for lazypath searches."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Tunables shared by all search algorithms."""

    # Node expansions between DEBUG progress records; 0 disables them
    progress_interval: int = 100_000

    def should_log_progress(self, expanded: int) -> bool:
        """Return True if a progress record is due after ``expanded`` expansions."""
        return self.progress_interval > 0 and expanded % self.progress_interval == 0


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
