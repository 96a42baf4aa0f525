##### Utility functions for key-value snippet files
from pathlib import Path
from typing import Optional, Union

from tqdm import tqdm

from .snippet import Snippet


def read_data(file_path : Union[str,Path]) -> bytes:
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise RuntimeError(f"Error reading key-value file {file_path}: {e}") from e


def input_to_snippet(raw_data : bytes, snippet : Optional[Snippet] = None, progress: bool = False) -> Snippet:
    if snippet is None:
        snippet = Snippet()

    try:
        string_data = raw_data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RuntimeError(f"Key-value data is not valid UTF-8 text: {e}") from e

    lines = string_data.split("\n")
    for line in tqdm(lines, desc="Loading snippets", disable=not progress):
        # only the first colon separates key from value
        key, sep, value = line.partition(":")
        if not sep:
            continue
        snippet.items[key] = value

    return snippet


def load_kv(file_path : Union[str,Path], progress: bool = False) -> Snippet:
    return input_to_snippet(read_data(file_path), progress=progress)
