"""
Command-line interface for Switchcord.

Provides commands to search the game catalog and check configuration.
"""

import asyncio
import json
import sys
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from switchcord.catalog import CatalogClient, CatalogError, QueryError
from switchcord.config import LoggingConfig, get_settings
from switchcord.logger import get_logger, setup_logging

logger = get_logger(__name__)


class CLIOutput(BaseModel):
    """Structured output for CLI commands."""

    success: bool
    command: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any] | list[Any] | None = None
    error: str | None = None


def print_json(output: CLIOutput) -> None:
    """Print output as formatted JSON."""
    print(json.dumps(output.model_dump(), indent=2, default=str))


async def cmd_search(search_term: str) -> bool:
    """Search the catalog for games matching a term."""
    logger.info("Searching catalog", component="cli", search_term=search_term)

    try:
        async with CatalogClient() as catalog:
            games = await catalog.search_by_term(search_term)
    except QueryError as e:
        output = CLIOutput(
            success=False,
            command="search",
            data={
                "code": e.code,
                "status": e.status,
                "cause": e.cause.model_dump() if e.cause else None,
            },
            error=str(e),
        )
    except CatalogError as e:
        output = CLIOutput(
            success=False,
            command="search",
            error=f"{type(e).__name__}: {e}",
        )
    else:
        output = CLIOutput(
            success=True,
            command="search",
            data=[game.model_dump() for game in games],
        )

    print_json(output)
    return output.success


async def cmd_test_config() -> bool:
    """Test configuration loading."""
    settings = get_settings()

    output = CLIOutput(
        success=True,
        command="test-config",
        data={
            "catalog_url": settings.catalog.url,
            "catalog_timeout_seconds": settings.catalog.timeout_seconds,
            "catalog_platform_id": settings.catalog.platform_id,
            "catalog_category": settings.catalog.category,
            "catalog_result_limit": settings.catalog.result_limit,
            "api_key_configured": bool(settings.catalog.api_key.get_secret_value()),
        },
    )
    print_json(output)
    return output.success


def print_usage() -> None:
    """Print CLI usage information."""
    usage = """
Switchcord CLI
==============

Usage: switchcord <command> [arguments]

Commands:
  test-config                 Test configuration loading
  search <term>               Search Nintendo Switch games matching <term>

Examples:
  switchcord search zelda
  switchcord search "mario kart"
"""
    print(usage)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    setup_logging(LoggingConfig())

    if not args:
        print_usage()
        sys.exit(1)

    command = args[0]

    try:
        if command == "test-config":
            ok = asyncio.run(cmd_test_config())

        elif command == "search":
            if len(args) < 2:
                print("Error: search term required")
                sys.exit(1)
            ok = asyncio.run(cmd_search(" ".join(args[1:])))

        elif command in ("help", "--help", "-h"):
            print_usage()
            ok = True

        else:
            print(f"Unknown command: {command}")
            print_usage()
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception("CLI error", component="cli", error=str(e))
        output = CLIOutput(
            success=False,
            command=command,
            error=str(e),
        )
        print_json(output)
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
