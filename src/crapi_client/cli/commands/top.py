from __future__ import annotations

from typing import Annotated

import typer

from crapi_client.cli.output import OutputFormat, api_errors, render_json, render_table
from crapi_client.core.api import build_api
from crapi_client.shared.logging import get_logger

app = typer.Typer(help="ランキングの表示")

LocationOption = Annotated[
    str | None, typer.Option("--location", "-l", help="地域コード (例: EU)。省略時は全体")
]
LimitOption = Annotated[int, typer.Option("--limit", min=1, max=200, help="表示件数")]
OutputOption = Annotated[
    OutputFormat,
    typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
]


@app.command()
def clans(
    location: LocationOption = None,
    limit: LimitOption = 20,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """上位クランを表示する。"""

    logger = get_logger("cli.top.clans", location=location)
    api = build_api(logger=logger)

    with api_errors(logger):
        items = api.get_top_clans(location)[:limit]

    if output is OutputFormat.JSON:
        render_json(items)
        return
    render_table(
        f"Top Clans ({location or 'global'})",
        ("Rank", "Tag", "Name", "Score", "Members"),
        [(item.rank, item.tag, item.name, item.score, item.member_count) for item in items],
    )


@app.command()
def players(
    location: LocationOption = None,
    limit: LimitOption = 20,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """上位プレイヤーを表示する。"""

    logger = get_logger("cli.top.players", location=location)
    api = build_api(logger=logger)

    with api_errors(logger):
        items = api.get_top_players(location)[:limit]

    if output is OutputFormat.JSON:
        render_json(items)
        return
    render_table(
        f"Top Players ({location or 'global'})",
        ("Rank", "Tag", "Name", "Trophies", "Clan"),
        [
            (item.rank, item.tag, item.name, item.trophies, item.clan.name if item.clan else None)
            for item in items
        ],
    )
