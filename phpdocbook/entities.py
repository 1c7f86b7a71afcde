"""Rewriting of undefined XML entities in reference sources."""

from __future__ import annotations

import os
import re
from typing import Iterable, Union

_ENTITY = re.compile(r"&(?!(amp|quot|gt|lt)\b)([a-z]+);")


def replace_entities(text: str) -> str:
    """Turn every entity other than the basic XML ones into a constant element."""
    return _ENTITY.sub(lambda match: f"<constant>{match.group(2)}</constant>", text)


def replace_entities_in_files(paths: Iterable[Union[str, "os.PathLike[str]"]]) -> None:
    """Rewrite the entities of each file in place."""
    for path in paths:
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(replace_entities(content))