"""JSONL export of parsed documents.

Usage::

    from mdlens import load_many, to_jsonl

    docs = load_many(["a.md", "b.md"])
    to_jsonl(docs, "/tmp/docs.jsonl")
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from mdlens.items import DocumentSchema


def to_jsonl(documents: Iterable[DocumentSchema], path: str | Path) -> int:
    """Write one JSON object per document to *path* (created/overwritten).

    Keys are the camelCase record names; unset optional fields are left out.

    Returns:
        Number of lines written.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    total = 0
    with out_path.open("w", encoding="utf-8") as fh:
        for document in documents:
            fh.write(json.dumps(document.to_dict(), ensure_ascii=False) + "\n")
            total += 1
    return total
