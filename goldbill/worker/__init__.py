"""Start-up and maintenance jobs for the billing service"""
from .data_seeder import DataSeeder, SeedResult

__all__ = ["DataSeeder", "SeedResult"]
