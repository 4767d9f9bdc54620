"""Load a glossary file and write the static HTML site."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import List

from glossgen.glossary import Glossary, load_glossary
from glossgen.render import DEFAULT_INDEX_TITLE, render_index_page, render_term_page
from glossgen.utils.paths import index_path, page_filename, page_path

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildOptions:
    encoding: str = "utf-8"
    index_title: str = DEFAULT_INDEX_TITLE
    strict: bool = False


@dataclass(slots=True)
class BuildResult:
    glossary: Glossary
    index_file: Path
    term_files: List[Path]

    @property
    def written_files(self) -> List[Path]:
        return [*self.term_files, self.index_file]


def ensure_input_file(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"入力ファイルが見つかりません: {path}")
    return path


def write_site(glossary: Glossary, output_dir: Path, options: BuildOptions | None = None) -> BuildResult:
    """Write one page per term plus ``index.html`` into ``output_dir``.

    Terms are validated as file names before the directory is created, so an
    unusable term leaves no output behind. Write errors propagate; files
    already written are left in place.
    """
    options = options or BuildOptions()
    sorted_terms = glossary.sorted_terms()
    for term in sorted_terms:
        page_filename(term)

    output_dir.mkdir(parents=True, exist_ok=True)
    term_set = frozenset(glossary.terms)
    term_files: List[Path] = []
    for term in sorted_terms:
        html = render_term_page(term, glossary.definition_of(term), term_set)
        dest = page_path(output_dir, term)
        dest.write_text(html, encoding=options.encoding)
        logger.debug("用語ページを保存しました: %s", dest)
        term_files.append(dest)

    index_file = index_path(output_dir)
    index_file.write_text(
        render_index_page(sorted_terms, title=options.index_title),
        encoding=options.encoding,
    )
    logger.info("索引ページを保存しました: %s (%d terms)", index_file, len(sorted_terms))
    return BuildResult(glossary=glossary, index_file=index_file, term_files=term_files)


def build_glossary_site(input_path: Path, output_dir: Path, options: BuildOptions | None = None) -> BuildResult:
    """Load ``input_path`` and write the site; nothing is written if loading fails."""
    options = options or BuildOptions()
    ensure_input_file(input_path)
    glossary = load_glossary(input_path, encoding=options.encoding, strict=options.strict)
    if glossary.issues:
        logger.warning("入力に %d 件の問題がありました (%s)", len(glossary.issues), input_path)
    return write_site(glossary, output_dir, options)


__all__ = [
    "BuildOptions",
    "BuildResult",
    "build_glossary_site",
    "ensure_input_file",
    "write_site",
]
