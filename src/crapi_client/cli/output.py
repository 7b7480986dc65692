"""CLI 共通の出力・例外ハンドリング。"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from enum import Enum

import typer
from rich.console import Console
from rich.table import Table

from crapi_client.core.api import ApiError, CrApiError
from crapi_client.shared.types import DTO, dto_dict

RATE_LIMIT_STATUS = 429


class OutputFormat(str, Enum):
    """出力形式。"""

    TABLE = "table"
    JSON = "json"


def render_json(items: DTO | Iterable[DTO]) -> None:
    if isinstance(items, DTO):
        payload: object = dto_dict(items)
    else:
        payload = [dto_dict(item) for item in items]
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def render_table(title: str, columns: Sequence[str], rows: Iterable[Sequence[object]]) -> None:
    console = Console(force_terminal=False, color_system=None)
    table = Table(title=title)
    for index, column in enumerate(columns):
        table.add_column(column, style="cyan" if index == 0 else None, no_wrap=index == 0)
    for row in rows:
        table.add_row(*("-" if value is None else str(value) for value in row))
    console.print(table)


@contextmanager
def api_errors(logger) -> Iterator[None]:
    """façade の例外を終了コードへ変換する。"""

    try:
        yield
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ApiError as exc:
        if exc.code == RATE_LIMIT_STATUS:
            logger.warning("cr-api rate limited", code=exc.code)
            typer.echo("cr-api のレート制限に到達しました。時間をおいて再実行してください。")
            raise typer.Exit(code=2) from exc
        logger.error("cr-api request failed", code=exc.code, error=str(exc))
        typer.echo(f"cr-api の呼び出しに失敗しました (status={exc.code})")
        raise typer.Exit(code=1) from exc
    except CrApiError as exc:
        logger.error("cr-api transport failed", error=str(exc))
        typer.echo(f"cr-api の呼び出しに失敗しました: {exc}")
        raise typer.Exit(code=1) from exc


__all__ = ["OutputFormat", "api_errors", "render_json", "render_table"]
