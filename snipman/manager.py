from typing import Union
from pathlib import Path

from .kv_store import load_kv
from .snippet import Snippet


class SnippetManager:

    root : Path
    file_path : Path
    progress : bool

    def __init__(
        self,
        root : Union[str,Path],
        filename: str = "items.txt",
        progress: bool = False,
    ):
        # nothing is created on disk
        self.root = Path(root)
        self.file_path = self.root / filename
        self.progress = progress

    def load(self) -> Snippet:
        snippet = load_kv(self.file_path, progress=self.progress)

        print(f"Loaded {len(snippet)} snippets from {self.file_path}")
        return snippet
