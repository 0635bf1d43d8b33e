from __future__ import annotations

# ---- Environment bootstrap (MUST be first) ----
from dotenv import load_dotenv

# Load .env once at process start
load_dotenv()

# ---- CLI imports ----
import logging
from typing import List, Optional

import typer

from .config import SlowConfig
from .copier import OutputError, UsageError, resolve_rate, run
from .logger import EventLogger


app = typer.Typer(
    add_completion=False,
    help="Copy stdin to stdout at serial-terminal speed.",
)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    ctx: typer.Context,
    speed: Optional[str] = typer.Argument(
        None, show_default=False, help="Bytes per second (default 960, minimum 10)."
    ),
):
    """
    Replay stdin on stdout at SPEED bytes per second.

    Example: slow 480 < xmas.txt
    """
    cfg = SlowConfig()
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    events = EventLogger.from_setting(cfg.event_log)

    args: List[str] = ([speed] if speed is not None else []) + list(ctx.args)
    try:
        rate = resolve_rate(args, cfg)
    except UsageError as e:
        events.log("copier", "usage_error", {"args": args})
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    stdin = typer.get_binary_stream("stdin")
    stdout = typer.get_binary_stream("stdout")

    try:
        result = run(rate, stdin, stdout, cfg=cfg, event_logger=events)
    except OutputError as e:
        typer.echo(f"slow: write error: {e}", err=True)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        raise typer.Exit(code=130)

    raise typer.Exit(code=result.exit_status)


if __name__ == "__main__":
    app()
