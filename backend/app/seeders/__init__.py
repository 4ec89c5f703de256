"""
Fixture seeding for the directory database.
"""
from app.seeders.members_seeder import MembersSeeder
from app.seeders.registry import MainSeeder, SeederModule, build_registry

__all__ = [
    "MembersSeeder",
    "MainSeeder",
    "SeederModule",
    "build_registry",
]
