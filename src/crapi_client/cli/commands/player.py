from __future__ import annotations

from typing import Annotated

import typer

from crapi_client.cli.output import OutputFormat, api_errors, render_json, render_table
from crapi_client.core.api import build_api
from crapi_client.infra.crapi import Profile, ProfileRequest
from crapi_client.shared.logging import get_logger

app = typer.Typer(help="プレイヤー関連のコマンド")


def _render_profile(profile: Profile) -> None:
    clan = profile.clan
    render_table(
        f"Player {profile.tag or '-'}",
        ("Field", "Value"),
        [
            ("Name", profile.name),
            ("Trophies", profile.trophies),
            ("Level", profile.exp_level),
            ("Arena", profile.arena.name if profile.arena else None),
            ("Clan", f"{clan.name} ({clan.tag})" if clan else None),
            ("Role", clan.role if clan else None),
            ("Deck", ", ".join(card.name or "?" for card in profile.current_deck) or None),
        ],
    )


@app.command()
def profile(
    tag: Annotated[str, typer.Argument(help="プレイヤータグ (# は省略可)")],
    keys: Annotated[
        list[str] | None, typer.Option("--key", "-k", help="取得するフィールドを限定する")
    ] = None,
    output: Annotated[
        OutputFormat,
        typer.Option("--output", "-f", case_sensitive=False, help="出力形式(table/json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """プレイヤープロフィールを表示する。"""

    logger = get_logger("cli.player.profile", tag=tag)
    api = build_api(logger=logger)

    with api_errors(logger):
        request = ProfileRequest.builder().tag(tag).keys(*(keys or ())).build()
        result = api.get_profile(request)

    if output is OutputFormat.JSON:
        render_json(result)
    else:
        _render_profile(result)
