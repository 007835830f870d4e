# src/recipe_hub/presentation/cli/_shared.py
"""CLI 内部共享的辅助工具。"""

from __future__ import annotations

import typer
from rich.console import Console

from recipe_hub.application.services import ConfigurationService
from recipe_hub.config import load_dotenv_files, load_environment
from recipe_hub_core.exceptions import ConfigValidationError

console = Console(stderr=True)


def load_config_or_exit() -> ConfigurationService:
    """加载 .env 与环境记录；校验失败时打印错误并以状态码 1 退出。"""
    load_dotenv_files()
    try:
        return ConfigurationService(load_environment())
    except ConfigValidationError as e:
        console.print(f"[bold red]❌ 启动失败：配置无效[/bold red]\n{e}")
        raise typer.Exit(code=1) from e
