from __future__ import annotations

import typer

from crapi_client.cli.commands import clan, constants, player, top, tournament
from crapi_client.cli.output import api_errors
from crapi_client.core.api import build_api
from crapi_client.shared.config import get_settings
from crapi_client.shared.logging import configure_logging, get_logger

app = typer.Typer(help="cr-api クライアントの CLI")

app.add_typer(player.app, name="player", help="プレイヤー情報の取得")
app.add_typer(clan.app, name="clan", help="クラン情報の取得と検索")
app.add_typer(top.app, name="top", help="ランキングの取得")
app.add_typer(tournament.app, name="tournament", help="トーナメント情報の取得")
app.add_typer(constants.app, name="constants", help="ゲーム定数の参照")


@app.command()
def version() -> None:
    """cr-api のバージョンを表示する。"""

    logger = get_logger("cli.version")
    api = build_api(logger=logger)

    with api_errors(logger):
        result = api.get_version()

    typer.echo(result)


def main() -> None:
    """エントリポイント。"""

    configure_logging(get_settings().log_level)
    app()


if __name__ == "__main__":  # pragma: no cover - CLI エントリ
    main()
