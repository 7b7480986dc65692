from __future__ import annotations

from typing import Annotated

import typer

from crapi_client.cli.output import OutputFormat, api_errors, render_json, render_table
from crapi_client.core.api import build_api
from crapi_client.infra.crapi import Clan, ClanSearch
from crapi_client.shared.logging import get_logger

app = typer.Typer(help="クラン関連のコマンド")

OutputOption = Annotated[
    OutputFormat,
    typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
]


def _render_members(clan: Clan) -> None:
    score = clan.score if clan.score is not None else "-"
    render_table(
        f"{clan.name or '-'} ({clan.tag or '-'}) score={score}",
        ("Rank", "Tag", "Name", "Role", "Trophies", "Donations"),
        [
            (member.rank, member.tag, member.name, member.role, member.trophies, member.donations)
            for member in clan.members
        ],
    )


@app.command()
def show(
    tag: Annotated[str, typer.Argument(help="クランタグ (# は省略可)")],
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """クラン情報とメンバー一覧を表示する。"""

    logger = get_logger("cli.clan.show", tag=tag)
    api = build_api(logger=logger)

    with api_errors(logger):
        result = api.get_clan(tag)

    if output is OutputFormat.JSON:
        render_json(result)
    else:
        _render_members(result)


@app.command()
def search(  # noqa: PLR0913 - CLI のため引数が多い
    name: Annotated[str | None, typer.Option("--name", "-n", help="クラン名")] = None,
    score: Annotated[int | None, typer.Option("--score", min=0, help="最低スコア")] = None,
    min_members: Annotated[int | None, typer.Option("--min-members", min=1, max=50)] = None,
    max_members: Annotated[int | None, typer.Option("--max-members", min=1, max=50)] = None,
    location_id: Annotated[int | None, typer.Option("--location-id", help="地域 ID")] = None,
    output: OutputOption = OutputFormat.TABLE,
) -> None:
    """条件を指定してクランを検索する。"""

    logger = get_logger("cli.clan.search", clan_name=name)
    api = build_api(logger=logger)
    criteria = ClanSearch(
        name=name,
        score=score,
        min_members=min_members,
        max_members=max_members,
        location_id=location_id,
    )

    with api_errors(logger):
        clans = api.get_clan_search(criteria)

    logger.info("クラン検索完了", results=len(clans))
    if output is OutputFormat.JSON:
        render_json(clans)
    else:
        render_table(
            "Clan Search",
            ("Tag", "Name", "Score", "Members", "Location"),
            [
                (
                    clan.tag,
                    clan.name,
                    clan.score,
                    clan.member_count,
                    clan.location.name if clan.location else None,
                )
                for clan in clans
            ],
        )
