"""
Database connection management using asyncpg for trusty.
"""
from contextlib import asynccontextmanager
from typing import Any, List, Optional

import asyncpg
from asyncpg import Pool, Record
from loguru import logger


class DatabaseManager:
    """Manages the asyncpg connection pool for the directory database."""

    def __init__(self, database_url: str, application_name: str = "trusty", **pool_config):
        """Initialize DatabaseManager.

        Args:
            database_url: PostgreSQL DSN in the form asyncpg accepts
            application_name: Reported to PostgreSQL as application_name
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url
        self.application_name = application_name

        # Pool configuration with sensible defaults
        self.pool_config = {
            "min_size": 2,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 10,
            **pool_config
        }

    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": self.application_name},
                **self.pool_config
            )
            logger.info("Database pool created successfully")
        return self.pool

    async def close_pool(self):
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        if not self.pool:
            await self.create_pool()

        async with self.pool.acquire() as connection:
            yield connection

    async def fetch(self, query: str, *args, timeout: float = None) -> List[Record]:
        """Fetch multiple rows."""
        async with self.acquire() as connection:
            return await connection.fetch(query, *args, timeout=timeout)

    async def fetchval(self, query: str, *args, column: int = 0, timeout: float = None) -> Any:
        """Fetch a single value."""
        async with self.acquire() as connection:
            return await connection.fetchval(query, *args, column=column, timeout=timeout)

    async def health_check(self) -> bool:
        """Check database health."""
        try:
            result = await self.fetchval("SELECT 1")
            return result == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False
