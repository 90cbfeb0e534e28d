# backend/pinecone_client.py

from functools import lru_cache

from pinecone import Pinecone, ServerlessSpec

import config
from exceptions import ConfigurationError
from logger import logger


@lru_cache(maxsize=1)
def get_index():
    """
    Connect to the history index, creating it on first use.

    Not done at import time so the API can start (and report a clean 500)
    without Pinecone credentials.
    """
    if not config.PINECONE_API_KEY:
        raise ConfigurationError("History storage not configured")

    pc = Pinecone(api_key=config.PINECONE_API_KEY)
    name = config.PINECONE_INDEX_NAME
    dimension = config.HISTORY_VECTOR_DIMENSION

    # Create index if required (always dense + cosine)
    if not pc.has_index(name):
        pc.create_index(
            name=name,
            dimension=dimension,
            metric="cosine",
            spec=ServerlessSpec(
                cloud=config.PINECONE_CLOUD,
                region=config.PINECONE_REGION,
            ),
        )
        logger.info("Created Pinecone index '%s' (%s-dim)", name, dimension)

    index = pc.Index(name)

    # Validate index dimension
    stats = index.describe_index_stats()
    index_dim = stats.get("dimension") if isinstance(stats, dict) else getattr(stats, "dimension", None)

    if index_dim is not None and index_dim != dimension:
        raise RuntimeError(
            f"Pinecone index dimension mismatch: index={index_dim}, "
            f"configured={dimension}. Set HISTORY_VECTOR_DIMENSION or use another index."
        )

    logger.info("Pinecone index '%s' validated (%s-dim)", name, index_dim)
    return index
