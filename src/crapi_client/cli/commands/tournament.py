from __future__ import annotations

from typing import Annotated

import typer

from crapi_client.cli.output import OutputFormat, api_errors, render_json, render_table
from crapi_client.core.api import build_api
from crapi_client.shared.logging import get_logger

app = typer.Typer(help="トーナメント関連のコマンド")


@app.command()
def show(
    tag: Annotated[str, typer.Argument(help="トーナメントタグ (# は省略可)")],
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """トーナメントの参加者順位を表示する。"""

    logger = get_logger("cli.tournament.show", tag=tag)
    api = build_api(logger=logger)

    with api_errors(logger):
        result = api.get_tournaments(tag)

    if output is OutputFormat.JSON:
        render_json(result)
        return
    players = f"{result.current_players or 0}/{result.max_players or '-'}"
    render_table(
        f"{result.name or '-'} [{result.status or '-'}] {players}",
        ("Rank", "Tag", "Name", "Score", "Clan"),
        [
            (
                member.rank,
                member.tag,
                member.name,
                member.score,
                member.clan.name if member.clan else None,
            )
            for member in result.members
        ],
    )
