"""
Spanner DDL CLI.
- export: 정규화 스키마 JSON → schema.sql
- show:   DDL 을 stdout 으로 출력
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from spanner_ddl.config import settings
from spanner_ddl.ddl_writer import write_ddl
from spanner_ddl.errors import ExportError
from spanner_ddl.exporter import ExportResult, export
from spanner_ddl.loader import load_graph

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="spanner-ddl",
    add_completion=False,
    help="정규화된 스키마 그래프(JSON)를 Cloud Spanner DDL 로 변환",
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="로그 레벨 (기본: SPANNER_DDL_LOG_LEVEL)"),
):
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run(graph_path: Path, validate_types: bool) -> ExportResult:
    cfg = settings.model_copy(update={"validate_types": validate_types or settings.validate_types})
    try:
        graph = load_graph(graph_path)
        return export(graph, cfg)
    except ExportError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


def _report_failures(result: ExportResult) -> None:
    for failure in result.failures:
        err_console.print(f"[yellow]Skipped table[/yellow] {failure.table_name}: {failure.reason}")


@app.command("export")
def export_cmd(
    graph_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="정규화 스키마 JSON 파일"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="출력 DDL 파일 (기본: <output_dir>/schema.sql)"),
    validate_types: bool = typer.Option(False, "--validate-types", help="Spanner 미지원 타입이면 해당 테이블 건너뜀"),
):
    """DDL 파일 생성."""
    result = _run(graph_path, validate_types)
    out_path = write_ddl(result.text, out or settings.output_dir / "schema.sql")
    tables = len(result.statements["tables_and_indexes"])
    refs = len(result.statements["refs"])
    console.print(f"Rendered [green]{tables}[/green] table/index and [green]{refs}[/green] ref statements")
    _report_failures(result)
    console.print(f"[bold green]DDL:[/bold green] {out_path}")


@app.command("show")
def show_cmd(
    graph_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="정규화 스키마 JSON 파일"),
    validate_types: bool = typer.Option(False, "--validate-types", help="Spanner 미지원 타입이면 해당 테이블 건너뜀"),
):
    """DDL 을 stdout 으로 출력."""
    result = _run(graph_path, validate_types)
    typer.echo(result.text)
    _report_failures(result)


if __name__ == "__main__":
    app()
