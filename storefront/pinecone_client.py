# storefront/pinecone_client.py

import logging
from functools import lru_cache

from pinecone import Pinecone

from storefront.errors import VectorStoreUnavailable

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _connect(api_key, index_name):
    pc = Pinecone(api_key=api_key)
    logger.info(f"Connected to Pinecone index '{index_name}'")
    return pc.Index(index_name)


def get_index(settings):
    if not settings.pinecone_configured:
        raise VectorStoreUnavailable("PINECONE_API_KEY is not set")
    return _connect(settings.pinecone_api_key, settings.pinecone_index_name)


def upsert_vectors(vectors, settings, namespace=None, batch_size=100):
    """
    vectors = [
      {"id": "prod-1", "values": [embedding floats], "metadata": {...}},
      ...
    ]
    """
    index = get_index(settings)
    namespace = namespace or settings.pinecone_namespace
    logger.info(f"Upserting {len(vectors)} vectors into '{namespace}' ...")
    upserted = 0
    for start in range(0, len(vectors), batch_size):
        batch = vectors[start:start + batch_size]
        index.upsert(vectors=batch, namespace=namespace)
        upserted += len(batch)
    logger.info(f"Upsert done ({upserted} vectors).")
    return upserted


def semantic_search(query_embedding, settings, namespace=None, top_k=5):
    """
    query_embedding: [float, float, ...] (same dimension as the index!)
    """
    index = get_index(settings)
    return index.query(
        vector=query_embedding,
        top_k=top_k,
        include_metadata=True,
        include_values=False,
        namespace=namespace or settings.pinecone_namespace,
    )


def describe_stats(settings):
    return get_index(settings).describe_index_stats()


def namespace_vector_count(stats, namespace):
    namespaces = stats.get("namespaces") or {}
    summary = namespaces.get(namespace) or {}
    return summary.get("vector_count", 0) or 0


def clear_namespace(settings, namespace=None):
    namespace = namespace or settings.pinecone_namespace
    logger.info(f"Clearing existing vectors from namespace '{namespace}' ...")
    get_index(settings).delete(delete_all=True, namespace=namespace)


def match_to_product(match, include_score=False):
    metadata = match.get("metadata") or {}
    product = {
        "id": match.get("id"),
        "name": metadata.get("name", ""),
        "description": metadata.get("chunk_text", ""),
        "category": metadata.get("category", ""),
        "price": metadata.get("price", 0),
        "imageUrl": metadata.get("imageUrl", ""),
    }
    if include_score:
        product["score"] = match.get("score") or 0
    return product


def matches_to_products(results, include_score=False):
    return [match_to_product(m, include_score) for m in results.get("matches") or []]
