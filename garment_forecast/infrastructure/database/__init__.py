"""
Database package - Infrastructure Layer

Concrete database connections used by the infrastructure gateways.
"""

from garment_forecast.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
