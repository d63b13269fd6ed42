from contextlib import contextmanager
from typing import Iterator, Optional

from neo4j import READ_ACCESS, GraphDatabase, Transaction

from utils.logger_utils import get_logger

logger = get_logger("Neo4j Client")


class Neo4jClient:
    """Owns the Neo4j driver and hands out request-scoped read transactions."""

    def __init__(self, uri: str, user: str, password: str, database: Optional[str] = None):
        """
        Args:
            uri: Bolt or neo4j URI (e.g. 'bolt://localhost:7687')
            user: Neo4j user
            password: Neo4j password
            database: Database name, None for the server default
        """
        self.uri = uri
        self.database = database

        try:
            self.driver = GraphDatabase.driver(uri, auth=(user, password))
            logger.info(f"Created Neo4j driver for {uri}")
        except Exception as e:
            logger.error(f"Failed to create Neo4j driver: {e}")
            raise

    @contextmanager
    def read_transaction(self) -> Iterator[Transaction]:
        """
        Opens a session and an explicit read transaction for one unit of work.
        Both are closed on every exit path; nothing is ever committed.
        """
        with self.driver.session(database=self.database, default_access_mode=READ_ACCESS) as session:
            transaction = session.begin_transaction()
            try:
                yield transaction
            finally:
                transaction.close()

    def close(self) -> None:
        self.driver.close()
        logger.info("Closed Neo4j driver")

    def __enter__(self) -> "Neo4jClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
