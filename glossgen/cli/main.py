"""Typerベースのglossgen CLIエントリーポイント。"""
from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Optional

import typer

from glossgen.config import get_settings
from glossgen.glossary import GlossaryError, load_glossary
from glossgen.pipeline import BuildOptions, build_glossary_site, ensure_input_file

app = typer.Typer(help="用語集テキストから静的HTMLの用語集を生成する")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format='[%(levelname)s] %(message)s')


def _resolve_path(value: Optional[Path], default: Optional[Path], prompt: str) -> Path:
    if value is not None:
        return value
    if default is not None:
        return default
    return Path(typer.prompt(prompt))


def _resolve_encoding(raw: Optional[str], default: str) -> str:
    encoding = raw or default
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise typer.BadParameter(f"未対応の文字コードです: {encoding}", param_hint="--encoding") from exc
    return encoding


@app.command()
def build(
    input_file: Optional[Path] = typer.Argument(None, help='用語と定義を記述したテキストファイル。未指定なら入力を求める'),
    output_dir: Optional[Path] = typer.Argument(None, help='HTMLを書き出すフォルダ。未指定なら入力を求める'),
    strict: Optional[bool] = typer.Option(None, '--strict/--no-strict', help='形式エラーの行で処理を中断する'),
    title: Optional[str] = typer.Option(None, '--title', help='索引ページのタイトル'),
    encoding: Optional[str] = typer.Option(None, '--encoding', help='入出力ファイルの文字コード'),
    verbose: bool = typer.Option(False, '--verbose', help='詳細ログを有効化'),
) -> None:
    """用語ページと index.html を生成する。"""
    _configure_logging(verbose)
    settings = get_settings().build

    source = _resolve_path(input_file, settings.input_path, "Input file (with terms and definitions)")
    dest = _resolve_path(output_dir, settings.output_dir, "Output folder")
    options = BuildOptions(
        encoding=_resolve_encoding(encoding, settings.encoding),
        index_title=title or settings.index_title,
        strict=settings.strict if strict is None else strict,
    )

    try:
        result = build_glossary_site(source, dest, options)
    except (OSError, UnicodeDecodeError, GlossaryError) as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"wrote {len(result.written_files)} files to {dest}")


@app.command("terms")
def list_terms(
    input_file: Optional[Path] = typer.Argument(None, help='用語と定義を記述したテキストファイル'),
    encoding: Optional[str] = typer.Option(None, '--encoding', help='入力ファイルの文字コード'),
    verbose: bool = typer.Option(False, '--verbose', help='詳細ログを有効化'),
) -> None:
    """読み込んだ用語をソート順で一覧表示する。"""
    _configure_logging(verbose)
    settings = get_settings().build
    source = _resolve_path(input_file, settings.input_path, "Input file (with terms and definitions)")
    file_encoding = _resolve_encoding(encoding, settings.encoding)

    try:
        glossary = load_glossary(ensure_input_file(source), encoding=file_encoding)
    except (OSError, UnicodeDecodeError, GlossaryError) as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for term in glossary.sorted_terms():
        typer.echo(term)
    if glossary.issues:
        typer.echo(f"[warn] {len(glossary.issues)} issues while loading", err=True)


if __name__ == '__main__':  # pragma: no cover
    app()
