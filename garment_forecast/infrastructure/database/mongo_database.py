"""
MongoDB Database - Infrastructure Layer

This module provides a thin MongoDB client wrapper. pymongo is blocking, so
async reads are delegated to a worker thread.
"""

import asyncio
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database


class MongoDatabase:
    """MongoDB database client."""

    def __init__(
        self,
        mongo_uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            server_selection_timeout_ms: How long pymongo waits for a server
        """
        self.client: MongoClient = MongoClient(
            mongo_uri, serverSelectionTimeoutMS=server_selection_timeout_ms
        )
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        collection = self.get_collection(collection_name)
        return await asyncio.to_thread(collection.find_one, query)

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()
