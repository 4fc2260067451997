"""Data Seeding Job

Creates the database schema, seeds the sample customers into an empty
database and makes sure the default login exists.
Runs from the API lifespan or as a standalone script.
"""

import argparse
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import goldbill.domain  # noqa: F401  registers every table on SQLModel.metadata
from config import ApplicationConfig
from goldbill.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from goldbill.adapter.repositories.user_repository import SqlAlchemyUserRepository
from goldbill.adapter.services.password_hasher import ScryptPasswordHasher
from goldbill.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from goldbill.app.use_cases.auth import EnsureDefaultUser
from goldbill.app.use_cases.billing import InitializeSampleData

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    customers_created: int = 0
    default_user_created: bool = False


class DataSeeder:
    """
    Schema creation and seed data

    Features:
    - Creates missing tables (existing tables are left untouched)
    - Inserts the sample customers only when no customer exists
    - Creates the default user when DEFAULT_PASSWORD is configured
    - Safe to re-run

    Usage:
        seeder = DataSeeder()
        result = await seeder.run_once()
        await seeder.shutdown()
    """

    def __init__(self, db_uri: Optional[str] = None, config=ApplicationConfig):
        """
        Initialize the seeder

        Args:
            db_uri: Database URI (defaults to config.DB_URI)
            config: Configuration class providing the seeding options
        """
        self.config = config
        self.db_uri = db_uri or config.DB_URI

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def create_schema(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def run_once(self) -> SeedResult:
        """
        Create the schema and seed data

        Returns:
            SeedResult with what was inserted
        """
        await self.create_schema()
        result = SeedResult()

        async with self.async_session_factory() as session:
            uow = SqlAlchemyUnitOfWork(session)

            if self.config.SEED_SAMPLE_CUSTOMERS:
                seeded = await InitializeSampleData(
                    uow, SqlAlchemyCustomerRepository(session)
                ).execute()
                if seeded.is_err():
                    logger.error(f"Sample data seeding failed: {seeded.error.reason}")
                else:
                    result.customers_created = seeded.value
                    if seeded.value:
                        logger.info(f"Seeded {seeded.value} sample customers")

            if self.config.DEFAULT_PASSWORD:
                ensured = await EnsureDefaultUser(
                    uow, SqlAlchemyUserRepository(session), ScryptPasswordHasher()
                ).execute(self.config.DEFAULT_USERNAME, self.config.DEFAULT_PASSWORD)
                if ensured.is_err():
                    logger.error(f"Default user creation failed: {ensured.error.reason}")
                else:
                    result.default_user_created = ensured.value
                    if ensured.value:
                        logger.info(f"Created default user {self.config.DEFAULT_USERNAME}")
            else:
                logger.info("DEFAULT_PASSWORD not set, skipping default user")

        return result

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("DataSeeder shutdown complete")


async def main():
    """
    Entry point for running the seeder as a standalone script

    Usage:
        python -m goldbill.worker.data_seeder [--db-uri URI]
    """
    parser = argparse.ArgumentParser(description="Create tables and seed the billing database")
    parser.add_argument("--db-uri", default=None, help="Database URI (defaults to DB_URI from env.yaml)")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    seeder = DataSeeder(db_uri=args.db_uri)
    try:
        result = await seeder.run_once()
        print(
            f"Seeding complete. Customers created: {result.customers_created}, "
            f"default user created: {result.default_user_created}"
        )
    finally:
        await seeder.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
