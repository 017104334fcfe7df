"""Loading a folder of text files into a title -> content mapping."""
from __future__ import annotations

import codecs
from pathlib import Path
from typing import Dict, Sequence

from common.errors import DocumentSourceError

SAMPLE_BYTES = 4096
CANDIDATE_ENCODINGS = ("utf-8", "cp1251")


def detect_file_encoding(
    path: Path,
    default: str = "utf-8",
    *,
    candidates: Sequence[str] = CANDIDATE_ENCODINGS,
) -> str:
    """Pick the first candidate that decodes the opening bytes of ``path``.

    The sample is fed to an incremental decoder, so a multibyte character
    cut off at the end of the sample is not mistaken for a decode error.
    """

    with path.open("rb") as handle:
        raw = handle.read(SAMPLE_BYTES)
    if not raw:
        return default
    for enc in candidates:
        try:
            codecs.getincrementaldecoder(enc)().decode(raw, final=False)
            return enc
        except UnicodeDecodeError:
            continue
    return default


def load_documents(
    folder: Path,
    extension: str = ".txt",
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> Dict[str, str]:
    """Read every ``extension`` file directly inside ``folder``.

    Titles are file names without the extension. Two files that would share
    a title (``Hamlet.txt`` and ``Hamlet.TXT``) or an unreadable file abort
    the load so that analysis never runs on a partial document set.
    """

    if not folder.is_dir():
        raise DocumentSourceError(f"Document folder '{folder}' not found", context={"folder": str(folder)})

    suffix = extension.lower()
    documents: Dict[str, str] = {}
    sources: Dict[str, Path] = {}
    for path in sorted(folder.iterdir()):
        if not path.is_file() or path.suffix.lower() != suffix:
            continue
        title = path.stem
        if title in sources:
            raise DocumentSourceError(
                f"Documents '{sources[title].name}' and '{path.name}' share the title '{title}'",
                context={"title": title, "paths": [str(sources[title]), str(path)]},
            )
        try:
            detected = detect_file_encoding(path, default=encoding)
            # newline="" keeps "\r\n" and "\r" as they are on disk
            with path.open("r", encoding=detected, errors=errors, newline="") as handle:
                documents[title] = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentSourceError(
                f"Could not read document '{path}': {exc}",
                context={"path": str(path)},
            ) from exc
        sources[title] = path
    return documents
