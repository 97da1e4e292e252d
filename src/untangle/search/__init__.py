from untangle.search.base import SearchProvider, match_path
from untangle.search.git_grep import GitGrepSearchProvider
from untangle.search.static import StaticSearchProvider

__all__ = [
    "SearchProvider",
    "match_path",
    "GitGrepSearchProvider",
    "StaticSearchProvider",
]
