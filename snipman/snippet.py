from typing import Dict, Optional, Tuple


class ItemNotFoundError(LookupError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Item '{key}' not found")
        self.key = key


class Snippet:
    """In-memory key -> value store for text snippets.

    No ordering is promised over the entries.
    """

    items : Dict[str, str]

    def __init__(self) -> None:
        self.items = {}

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: object) -> bool:
        return key in self.items

    def create(self, key: str, value: str) -> Optional[str]:
        """Insert or overwrite, returning the previous value if there was one."""
        previous = self.items.get(key)
        self.items[key] = value
        return previous

    def retrieve(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def update(self, key: str, updated_value: str) -> None:
        # never creates a missing key
        if key not in self.items:
            raise ItemNotFoundError(key)
        self.items[key] = updated_value

    def delete(self, key: str) -> Optional[Tuple[str, str]]:
        if key not in self.items:
            return None
        return key, self.items.pop(key)
