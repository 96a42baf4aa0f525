import sys

from .config import get_settings
from .manager import SnippetManager
from .menu import run


def main() -> int:
    """Load the snippets file and start the interactive menu."""
    settings = get_settings()

    try:
        manager = SnippetManager(
            root=settings.SNIPMAN_DATA_DIR,
            filename=settings.SNIPMAN_FILENAME,
            progress=settings.SNIPMAN_PROGRESS,
        )
        snippet = manager.load()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run(snippet)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
