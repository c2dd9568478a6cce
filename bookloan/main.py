"""Composition root for the bookloan lending system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive CLI loop
"""

import json
import logging
import sys
from typing import Any

from bookloan.adapters.cli.commands import CLICommandHandler
from bookloan.adapters.members.static import StaticMemberDirectory
from bookloan.adapters.notification.markdown import MarkdownNotificationAdapter
from bookloan.adapters.notification.stdout import StdoutNotificationAdapter
from bookloan.adapters.notification.webhook import WebhookNotificationAdapter
from bookloan.adapters.store.memory import InMemoryBookRepository
from bookloan.adapters.store.sqlite import SQLiteBookRepository
from bookloan.config import Settings, load_settings
from bookloan.core.catalog_service import BookCatalogService
from bookloan.core.ports import BookRepositoryPort, NotificationPort

logger = logging.getLogger(__name__)


def run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for lending desk commands. Each line
    is a command name followed by an optional JSON object of arguments.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("bookloan> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = cli_handler.execute(command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Add copies of a book, creating it if needed.
    Required: title, copies

    Example: add {"title": "1984", "copies": 3}

  borrow
    Lend one copy of a book to a member.
    Required: member_id, title

    Example: borrow {"member_id": 1, "title": "1984"}

  return
    Take back one copy of a book.
    Required: member_id, title

    Example: return {"member_id": 1, "title": "1984"}

  available
    List books that have copies on the shelf.
    Optional: format ("json" or "text")

    Example: available {"format": "text"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_repository(settings: Settings) -> BookRepositoryPort:
    """Instantiate the book repository selected by settings."""
    if settings.store_backend == "sqlite":
        logger.info(f"Book repository: SQLite ({settings.store_sqlite_path})")
        return SQLiteBookRepository(db_path=settings.store_sqlite_path)
    logger.info("Book repository: in-memory")
    return InMemoryBookRepository()


def build_notification(settings: Settings) -> NotificationPort:
    """Instantiate the notification adapter selected by settings."""
    if settings.notification_backend == "markdown":
        logger.info(f"Notification adapter: Markdown ({settings.notification_output_path})")
        return MarkdownNotificationAdapter(report_path=settings.notification_output_path)
    if settings.notification_backend == "webhook":
        logger.info("Notification adapter: Webhook")
        return WebhookNotificationAdapter(
            url=settings.webhook_url,
            timeout_seconds=settings.webhook_timeout_seconds,
        )
    logger.info("Notification adapter: Stdout")
    return StdoutNotificationAdapter(verbose=settings.debug)


def build_catalog(settings: Settings) -> BookCatalogService:
    """Wire adapters into the catalog service.

    Args:
        settings: Validated application settings.

    Returns:
        BookCatalogService ready for use.
    """
    repository = build_repository(settings)
    members = StaticMemberDirectory(settings.valid_member_ids)
    notification = build_notification(settings)

    logger.info(
        "Catalog service initialized",
        extra={"valid_members": len(settings.valid_member_ids)},
    )
    return BookCatalogService(
        repository=repository,
        members=members,
        notification=notification,
    )


def close_catalog(catalog: BookCatalogService) -> None:
    """Release resources held by the catalog's adapters."""
    adapters: list[Any] = [catalog.repository, catalog.notification]
    for adapter in adapters:
        if hasattr(adapter, "close"):
            adapter.close()


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI."""
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger.info("Loading bookloan lending desk...")

    catalog = build_catalog(settings)
    try:
        run_cli_interactive(CLICommandHandler(catalog))
    finally:
        close_catalog(catalog)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
