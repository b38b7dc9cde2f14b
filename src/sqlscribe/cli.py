"""
SQLScribe command line.

Usage:
    sqlscribe validate "SELECT * FROM users" --dialect mysql
    sqlscribe explain "SELECT id FROM users WHERE active = true"
    sqlscribe optimize "SELECT * FROM t WHERE a NOT IN (1, 2)"
    sqlscribe schema orders
    sqlscribe generate "list the ten newest users" --dialect postgresql --score
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from sql_tools import explain_sql, get_schema_info, optimize_sql, validate_sql

from .config import DEFAULT_DIALECT
from .logger_config import setup_logger
from .scorers import ScoreResult, score_all
from .workflow import GenerateSQLInput, WorkflowError, generate_sql

console = Console()

DIALECTS = ["mysql", "postgresql", "sqlite", "mssql", "oracle"]


# =============================================================================
# Renderers
# =============================================================================


def _bullets(items: List[str]) -> str:
    return "\n".join(f"  • {item}" for item in items) if items else "  [dim]none[/dim]"


def cmd_validate(args: argparse.Namespace) -> int:
    result = validate_sql(args.sql, args.dialect)
    status = (
        "[bold green]✓ valid[/bold green]"
        if result.is_valid
        else "[bold red]✗ no SQL keywords found[/bold red]"
    )
    console.print(status)
    console.print(Syntax(result.formatted or " ", "sql", word_wrap=True))
    console.print("[bold yellow]Warnings[/bold yellow]")
    console.print(_bullets(result.warnings))
    console.print("[bold cyan]Suggestions[/bold cyan]")
    console.print(_bullets(result.suggestions))
    return 0 if result.is_valid else 1


def cmd_explain(args: argparse.Namespace) -> int:
    result = explain_sql(args.sql)
    console.print(Panel(result.explanation.strip(), title="Explanation"))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Part")
    table.add_column("Description")
    for component in result.components:
        table.add_row(component.part, component.description)
    console.print(table)
    return 0


def cmd_optimize(args: argparse.Namespace) -> int:
    result = optimize_sql(args.sql)
    console.print(Syntax(result.optimized, "sql", word_wrap=True))
    console.print(f"[bold]{result.performance}[/bold]")
    console.print(_bullets(result.improvements))
    return 0


def cmd_schema(args: argparse.Namespace) -> int:
    info = get_schema_info(args.table_type)
    console.print(f"[bold cyan]Common columns:[/bold cyan] {', '.join(info.common_columns)}")
    console.print("[bold cyan]Relationships[/bold cyan]")
    console.print(_bullets(info.relationships))
    console.print("[bold cyan]Examples[/bold cyan]")
    for example in info.examples:
        console.print(Syntax(example, "sql", word_wrap=True))
    return 0


def _print_scores(results: dict) -> bool:
    table = Table(show_header=True, header_style="bold cyan", title="Scores")
    table.add_column("Scorer")
    table.add_column("Score", justify="right")
    table.add_column("Reason")

    all_ok = True
    for name, outcome in results.items():
        if isinstance(outcome, ScoreResult):
            table.add_row(name, f"{outcome.score:.2f}", outcome.reason)
        else:
            all_ok = False
            table.add_row(name, "[red]failed[/red]", str(outcome))
    console.print(table)
    return all_ok


async def _generate(args: argparse.Namespace) -> int:
    input_data = GenerateSQLInput(
        message=args.message, dialect=args.dialect, context=args.context
    )
    output = await generate_sql(
        input_data,
        on_chunk=lambda chunk: console.print(chunk, end="", markup=False, highlight=False),
    )
    console.print()
    console.print(Panel(Syntax(output.sql, "sql", word_wrap=True), title="SQL"))

    if args.score:
        results = await score_all(output.response, user_text=args.message)
        if not _print_scores(results):
            return 1
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    return asyncio.run(_generate(args))


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlscribe",
        description="Natural-language-to-SQL assistant and SQL text helpers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate and format a SQL query")
    p_validate.add_argument("sql")
    p_validate.add_argument("--dialect", choices=DIALECTS, default=DEFAULT_DIALECT)
    p_validate.set_defaults(func=cmd_validate)

    p_explain = sub.add_parser("explain", help="Explain a SQL query in plain English")
    p_explain.add_argument("sql")
    p_explain.set_defaults(func=cmd_explain)

    p_optimize = sub.add_parser("optimize", help="Suggest optimizations for a SQL query")
    p_optimize.add_argument("sql")
    p_optimize.set_defaults(func=cmd_optimize)

    p_schema = sub.add_parser("schema", help="Show common schema patterns for a table type")
    p_schema.add_argument("table_type")
    p_schema.set_defaults(func=cmd_schema)

    p_generate = sub.add_parser("generate", help="Generate SQL from a natural language request")
    p_generate.add_argument("message")
    p_generate.add_argument("--dialect", choices=DIALECTS)
    p_generate.add_argument("--context", help="Table schema or other requirements")
    p_generate.add_argument(
        "--score",
        action="store_true",
        help="Grade the response with the correctness, intent and readability scorers",
    )
    p_generate.set_defaults(func=cmd_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger(log_to_file=not args.no_log_file)

    try:
        return args.func(args)
    except WorkflowError as e:
        console.print(f"[bold red]✗[/bold red] {e}")
        return 2
    except KeyboardInterrupt:
        console.print()
        console.print("[yellow]Cancelled by user[/yellow]")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
