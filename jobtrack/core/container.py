"""
Application Container

Holds the process-wide DatabaseManager between startup and shutdown.
"""

from typing import Dict, Any, Optional
from jobtrack.core.database import DatabaseManager
from jobtrack.utils.logger import get_logger

logger = get_logger(__name__)


class SimpleContainer:
    """Named registry of resources opened at startup."""

    def __init__(self):
        self._instances: Dict[str, Any] = {}

    async def initialize(self, database_url: Optional[str] = None):
        """Open the job store and create its tables; a no-op when already open."""
        if 'db_manager' in self._instances:
            return

        logger.info("Opening job store")

        db_manager = DatabaseManager(database_url)
        await db_manager.init_database()
        await db_manager.create_tables()
        self._instances['db_manager'] = db_manager

        logger.info("Job store ready", driver=db_manager.database_url.split("://")[0])

    async def shutdown(self):
        """Close every registered resource."""
        db_manager = self._instances.pop('db_manager', None)
        if db_manager is not None:
            await db_manager.close_connections()
            logger.info("Job store closed")

        self._instances.clear()

    def get(self, name: str) -> Any:
        """Get a registered resource by name."""
        instance = self._instances.get(name)
        if instance is None:
            raise RuntimeError(f"Container has no '{name}'. Was init_container() called?")
        return instance


container = SimpleContainer()


async def init_container(database_url: Optional[str] = None):
    await container.initialize(database_url)


async def shutdown_container():
    await container.shutdown()


def get_container() -> SimpleContainer:
    return container
