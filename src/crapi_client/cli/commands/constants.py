from __future__ import annotations

from typing import Annotated

import typer

from crapi_client.cli.output import OutputFormat, api_errors, render_json, render_table
from crapi_client.core.api import build_api
from crapi_client.shared.logging import get_logger

app = typer.Typer(help="ゲーム定数の参照")


@app.command()
def cards(
    rarity: Annotated[
        str | None, typer.Option("--rarity", "-r", help="レアリティで絞り込む (例: Epic)")
    ] = None,
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """カード定義の一覧を表示する。"""

    logger = get_logger("cli.constants.cards")
    api = build_api(logger=logger)

    with api_errors(logger):
        items = api.get_cards_constants()

    if rarity:
        wanted = rarity.lower()
        items = tuple(item for item in items if (item.rarity or "").lower() == wanted)

    if output is OutputFormat.JSON:
        render_json(items)
        return
    render_table(
        "Cards",
        ("Key", "Name", "Elixir", "Type", "Rarity", "Arena"),
        [(item.key, item.name, item.elixir, item.type, item.rarity, item.arena) for item in items],
    )


@app.command()
def endpoints() -> None:
    """API が公開しているエンドポイントを表示する。"""

    logger = get_logger("cli.constants.endpoints")
    api = build_api(logger=logger)

    with api_errors(logger):
        result = api.get_endpoints()

    for path in result.paths:
        typer.echo(path)
