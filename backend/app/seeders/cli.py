#!/usr/bin/env python3
"""
Database Seeder CLI

Usage:
    members-seed [command] [module]
    python -m app.seeders [command] [module]

Commands:
    seed [module]     Seed all modules or a specific module
    clear [module]    Clear all modules or a specific module
    reset [module]    Reset all modules or a specific module (clear + seed)
    list              Show available modules
    help              Show this help message

Exit code is 0 on success, 1 on an invalid command or any error.
"""
import argparse
import asyncio
import logging
import sys
from typing import Optional

from app.config import get_settings
from app.core.logging_config import setup_logging
from app.database.connections import close_connections, get_mongo_client
from app.database.databases import directory_db
from app.seeders.registry import MainSeeder, build_registry

logger = logging.getLogger("seeder")

COMMANDS = ("seed", "clear", "reset", "list", "help")

HELP_TEXT = """
🌱 Database Seeder CLI

Usage: members-seed [command] [module]

Commands:
  seed [module]     Seed all modules or specific module
  clear [module]    Clear all modules or specific module
  reset [module]    Reset all modules or specific module (clear + seed)
  list              Show available modules
  help              Show this help message

Examples:
  members-seed seed              # Seed all modules
  members-seed seed members      # Seed only members module
  members-seed clear members     # Clear only members module
  members-seed reset members     # Reset only members module
  members-seed list              # Show available modules

Available modules: {modules}
"""


class SeederArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting with status 2."""

    def error(self, message):
        raise ValueError(message)


def build_parser() -> SeederArgumentParser:
    parser = SeederArgumentParser(
        prog="members-seed",
        description="Seed or clear fixture data in the directory database.",
        add_help=False,
    )
    parser.add_argument("command", nargs="?", default="help")
    parser.add_argument("module", nargs="?", default=None)
    parser.add_argument("-h", "--help", dest="show_help", action="store_true")
    return parser


async def run_command(seeder: MainSeeder, command: str, module_name: Optional[str]) -> None:
    """
    Dispatch one CLI command.

    Raises:
        ValueError: If the command or module is unknown
    """
    if command == "seed":
        if module_name:
            await seeder.seed_module(module_name)
        else:
            await seeder.seed_all()
    elif command == "clear":
        if module_name:
            await seeder.clear_module(module_name)
        else:
            await seeder.clear_all()
    elif command == "reset":
        if module_name:
            await seeder.reset_module(module_name)
        else:
            await seeder.reset_all()
    elif command == "list":
        print("📋 Available modules:")
        for name in seeder.available_modules():
            print(f"  - {name}")
    elif command == "help":
        print(HELP_TEXT.format(modules=", ".join(seeder.available_modules())))
    else:
        raise ValueError(f'Invalid command "{command}". Use "help" to see available commands.')


async def main_async(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        args = build_parser().parse_args(argv)
    except ValueError as e:
        logger.error(f"❌ {e}")
        return 1

    command = "help" if args.show_help else args.command
    if command not in COMMANDS:
        logger.error(f'❌ Invalid command "{command}". Use "help" to see available commands.')
        return 1

    try:
        client = await get_mongo_client()
        db = client[directory_db.DB_NAME]
        logger.info("Database connected for seeding")

        seeder = MainSeeder(build_registry(db))
        await run_command(seeder, command, args.module)

        logger.info("Seeding operation completed successfully")
        return 0
    except Exception as e:
        logger.error(f"❌ Seeding operation failed: {e}")
        return 1
    finally:
        await close_connections()


def main(argv: Optional[list[str]] = None) -> None:
    """Console entry point."""
    setup_logging(get_settings().log_level)
    try:
        exit_code = asyncio.run(main_async(argv))
    except KeyboardInterrupt:
        print("\n👋 Seeding interrupted")
        exit_code = 0
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
