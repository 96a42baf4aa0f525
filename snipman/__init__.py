"""Terminal key-value snippet manager."""

__version__ = "0.1.0"

from snipman.kv_store import input_to_snippet, load_kv, read_data
from snipman.manager import SnippetManager
from snipman.snippet import ItemNotFoundError, Snippet

__all__ = [
    "ItemNotFoundError",
    "Snippet",
    "SnippetManager",
    "input_to_snippet",
    "load_kv",
    "read_data",
    "__version__",
]
