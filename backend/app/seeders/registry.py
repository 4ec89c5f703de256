"""
Static seeder registry and the dispatcher used by the CLI.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import get_settings
from app.seeders.members_seeder import MembersSeeder

logger = logging.getLogger(__name__)


@dataclass
class SeederModule:
    """Seed/clear capability pair for one module."""
    name: str
    seed: Callable[[], Awaitable[Any]]
    clear: Callable[[], Awaitable[Any]]


def build_registry(
    db: AsyncIOMotorDatabase, data_dir: Optional[Path] = None
) -> dict[str, SeederModule]:
    """
    Build the module name -> seeder mapping.

    Args:
        db: Directory database to seed
        data_dir: Fixture directory (defaults to ``settings.seed_data_dir``)
    """
    if data_dir is None:
        data_dir = get_settings().seed_data_dir

    members = MembersSeeder(db, data_dir)
    modules = [
        SeederModule(name="members", seed=members.seed, clear=members.clear),
    ]
    return {module.name: module for module in modules}


class MainSeeder:
    """Runs seed/clear/reset across all registered modules or a single one."""

    def __init__(self, registry: dict[str, SeederModule]):
        self.registry = registry

    def available_modules(self) -> list[str]:
        return list(self.registry)

    def get_module(self, name: str) -> SeederModule:
        """
        Raises:
            ValueError: If no module is registered under ``name``
        """
        module = self.registry.get(name)
        if module is None:
            raise ValueError(
                f'Module "{name}" not found. '
                f"Available modules: {', '.join(self.available_modules())}"
            )
        return module

    async def seed_all(self) -> None:
        logger.info("🚀 Starting seeding for all modules...")
        for module in self.registry.values():
            try:
                logger.info(f"🌱 Seeding {module.name}...")
                await module.seed()
                logger.info(f"✅ {module.name} seeding completed!")
            except Exception as e:
                logger.error(f"❌ {module.name} seeding failed: {e}")
                raise
        logger.info("🎉 All modules seeded successfully!")

    async def seed_module(self, name: str) -> None:
        module = self.get_module(name)
        logger.info(f"🌱 Seeding {module.name}...")
        await module.seed()
        logger.info(f"✅ {module.name} seeding completed!")

    async def clear_all(self) -> None:
        logger.info("🧹 Clearing all modules...")
        for module in self.registry.values():
            try:
                logger.info(f"🧹 Clearing {module.name}...")
                await module.clear()
                logger.info(f"✅ {module.name} cleared!")
            except Exception as e:
                logger.error(f"❌ {module.name} clearing failed: {e}")
                raise
        logger.info("🎉 All modules cleared successfully!")

    async def clear_module(self, name: str) -> None:
        module = self.get_module(name)
        logger.info(f"🧹 Clearing {module.name}...")
        await module.clear()
        logger.info(f"✅ {module.name} cleared!")

    async def reset_all(self) -> None:
        """Clear then seed every module."""
        logger.info("🔄 Resetting all modules...")
        await self.clear_all()
        await self.seed_all()

    async def reset_module(self, name: str) -> None:
        module = self.get_module(name)
        logger.info(f"🔄 Resetting {module.name}...")
        await module.clear()
        await module.seed()
        logger.info(f"✅ {module.name} reset completed!")
