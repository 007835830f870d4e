# src/recipe_hub/presentation/cli/main.py
import typer
import uvicorn
from rich.traceback import install as install_rich_tracebacks

from recipe_hub.presentation.api import create_api_application

from ._shared import console, load_config_or_exit
from .commands import db

install_rich_tracebacks(show_locals=False, word_wrap=True)

app = typer.Typer(
    name="recipe-hub",
    help="🍳 Recipe-Hub 后端命令行工具。",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(db.app, name="db")


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="开发模式：代码变更时自动重启。"),
) -> None:
    """启动 HTTP 服务器，监听配置中的 host/port。"""
    config_service = load_config_or_exit()
    host = config_service.get("host", "0.0.0.0")
    port = int(config_service.get("port"))

    console.print(f"[dim]正在启动 Recipe-Hub ({host}:{port})...[/dim]")
    if reload:
        # 重载模式下由 uvicorn 在子进程中按工厂字符串重建应用，子进程自行加载环境
        uvicorn.run(
            "recipe_hub.presentation.api:create_api_application",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_config=None,
        )
    else:
        # 日志由应用自身的 structlog 配置接管
        uvicorn.run(
            create_api_application(config_service=config_service),
            host=host,
            port=port,
            log_config=None,
        )

