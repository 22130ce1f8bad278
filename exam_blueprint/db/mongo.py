"""MongoDB connection setup using Motor async driver."""

import os

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

# Configuration from environment variables with defaults
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "exam_blueprint")


def create_client(url: str | None = None) -> AsyncIOMotorClient:
    """Create a client. The caller owns it and must close it."""
    # Connection timeout to fail fast if MongoDB is unavailable
    return AsyncIOMotorClient(
        url or MONGODB_URL,
        serverSelectionTimeoutMS=5000,  # 5 second timeout
        connectTimeoutMS=5000,
    )


async def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Get the database from the client owned by the running app."""
    return request.app.state.mongo_client[DATABASE_NAME]
