"""Pathユーティリティ関数群。

用語ごとのページは ``<output_dir>/<term>.html`` に書き出す。
用語がそのままファイル名になるため、ディレクトリ区切りを含む用語や
``.`` / ``..`` は出力先の外を指してしまうので受け付けない。
"""
from __future__ import annotations

from pathlib import Path

from glossgen.glossary.models import GlossaryOutputError

INDEX_FILENAME = "index.html"
_INDEX_STEM = "index"
_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def page_filename(term: str) -> str:
    """用語ページのファイル名を返す。

    例:
        page_filename("cat") -> "cat.html"
        page_filename("a/b") -> GlossaryOutputError
        page_filename("index") -> GlossaryOutputError (index.html と衝突する)
    """
    if term in {".", ".."} or any(ch in term for ch in _FORBIDDEN_CHARS):
        raise GlossaryOutputError(f"用語をファイル名として使用できません: {term!r}")
    # 大文字小文字を区別しないファイルシステムでも index.html を上書きしない
    if term.casefold() == _INDEX_STEM:
        raise GlossaryOutputError(f"用語 {term!r} は {INDEX_FILENAME} と衝突します")
    return f"{term}.html"


def page_path(output_dir: Path, term: str) -> Path:
    return output_dir / page_filename(term)


def index_path(output_dir: Path) -> Path:
    return output_dir / INDEX_FILENAME


__all__ = ["INDEX_FILENAME", "index_path", "page_filename", "page_path"]
