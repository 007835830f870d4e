# src/recipe_hub/presentation/cli/commands/db.py
"""数据库管理命令。"""

from __future__ import annotations

from pathlib import Path

import typer
from alembic import command
from alembic.config import Config as AlembicConfig

from recipe_hub_core.exceptions import MissingConfigError

from .._shared import console, load_config_or_exit

app = typer.Typer(help="数据库管理命令 (迁移等)。", no_args_is_help=True)


def _find_alembic_ini() -> Path:
    """自下而上查找 alembic.ini。"""
    start = Path(__file__).resolve().parent
    for p in [Path.cwd(), *Path.cwd().parents, *start.parents]:
        candidate = p / "alembic.ini"
        if candidate.is_file():
            return candidate
    raise FileNotFoundError("未找到 Alembic 配置文件 'alembic.ini'。")


@app.command("upgrade")
def db_upgrade(
    revision: str = typer.Argument("head", help="目标版本号 (默认 'head')。"),
) -> None:
    """运行数据库迁移，将 Schema 升级到指定版本。"""
    config_service = load_config_or_exit()
    try:
        alembic_cfg = AlembicConfig(str(_find_alembic_ini()))
        # ConfigParser 会把 % 当作插值符号
        database_url = str(config_service.get("database_url")).replace("%", "%%")
        alembic_cfg.set_main_option("sqlalchemy.url", database_url)
        command.upgrade(alembic_cfg, revision)
    except (FileNotFoundError, MissingConfigError) as e:
        console.print(f"[bold red]❌ 迁移命令执行失败: {e}[/bold red]")
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✅ 数据库已升级到 {revision}[/bold green]")
