"""
SpamGuard CLI entry point.

Commands:
- spamguard check: Run a comment through the configured checkers
- spamguard checkers: List available checkers and whether they are enabled
- spamguard version: Show version information
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from spamguard import __version__
from spamguard.cli_ui import (
    banner,
    config_panel,
    console,
    decision_text,
    dim,
    error,
    is_interactive,
    make_table,
    prompt_text,
    spinner,
    success,
    warning,
)

# Exit codes for `spamguard check`
EXIT_PASSED = 0
EXIT_BLOCKED = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(debug: bool = False, log_level: str = "WARNING") -> None:
    """Configure logging. ``debug`` overrides ``log_level``."""
    level = logging.DEBUG if debug else getattr(logging, log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)


def _load_settings(config: Optional[Path], debug: bool):
    from spamguard.config.settings import SpamGuardSettings

    overrides = {"debug": True} if debug else {}
    return SpamGuardSettings(
        _config_path=str(config) if config else None,
        **overrides,
    )


@click.group()
@click.version_option(version=__version__, prog_name="spamguard")
def main() -> None:
    """SpamGuard - Pluggable anti-spam checks for comment systems."""
    pass


@main.command()
@click.option("--name", "-n", "user_name", required=True, help="Comment author name")
@click.option("--email", "-e", "user_email", default="", help="Comment author email")
@click.option(
    "--content",
    "-m",
    default=None,
    help="Comment text (read from stdin when omitted)",
)
@click.option("--url", "user_url", default="", help="Comment author website")
@click.option("--ip", "user_ip", default="", help="Comment author IP address")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to spamguard.yaml config file",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug logging",
)
def check(
    user_name: str,
    user_email: str,
    content: Optional[str],
    user_url: str,
    user_ip: str,
    config: Optional[Path],
    debug: bool,
) -> None:
    """Run a comment through the enabled checkers.

    Exits 0 when the comment passes, 1 when it is rejected, 2 on a
    configuration error and 130 when the content prompt is cancelled.

        spamguard check -n alice -e alice@example.com -m "Nice post!"
        echo "Buy cheap pills" | spamguard check -n bob
    """
    from spamguard.core import CheckerParams, ModerationPipeline
    from spamguard.core.checker import SpamGuardError

    if content is None:
        if is_interactive():
            content = prompt_text("Comment content:")
        else:
            content = click.get_text_stream("stdin").read()

    try:
        settings = _load_settings(config, debug)
        setup_logging(settings.debug, settings.log_level)
        pipeline = ModerationPipeline.from_settings(settings)
    except (ValidationError, SpamGuardError, ValueError) as e:
        error(str(e), hint="Check your spamguard.yaml or SPAMGUARD_* variables")
        raise SystemExit(EXIT_CONFIG_ERROR)

    names = [c.name for c in pipeline.checkers]
    config_panel(
        "SpamGuard Check",
        {
            "Checkers": ", ".join(names) or "none",
            "Fail Open": str(settings.fail_open),
        },
    )
    if not names:
        warning("No checkers enabled; every comment passes")

    params = CheckerParams(
        user_name=user_name,
        user_email=user_email,
        content=content,
        user_url=user_url,
        user_ip=user_ip,
    )

    with spinner("Checking comment..."):
        result = asyncio.run(pipeline.check(params))

    if result.results:
        make_table(
            "Checker results",
            ["Checker", "Decision", "Detail"],
            [
                [r.checker_name, decision_text(r.decision.value), r.message or ""]
                for r in result.results
            ],
        )
    console.print()

    if result.allowed:
        success("Comment passed")
        if result.abstained:
            dim(f"Abstained: {', '.join(result.abstained)}")
        raise SystemExit(EXIT_PASSED)

    if result.blocked_by:
        error(f"Comment blocked by '{result.blocked_by}'")
    else:
        error(
            f"Comment rejected: {', '.join(result.abstained)} could not decide "
            "and fail_open is off"
        )
    raise SystemExit(EXIT_BLOCKED)


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to spamguard.yaml config file",
)
def checkers(config: Optional[Path]) -> None:
    """List available checkers and whether they are enabled."""
    from spamguard.checkers import CheckerRegistry

    try:
        settings = _load_settings(config, debug=False)
    except ValidationError as e:
        error(str(e))
        raise SystemExit(EXIT_CONFIG_ERROR)

    enabled = set(settings.enabled_checkers())
    make_table(
        "Checkers",
        ["Name", "Enabled"],
        [
            [name, "yes" if name in enabled else "no"]
            for name in CheckerRegistry.list_checkers()
        ],
    )


@main.command()
def version() -> None:
    """Show version information."""
    banner(__version__)


if __name__ == "__main__":
    main()
