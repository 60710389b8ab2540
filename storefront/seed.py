# storefront/seed.py

import argparse
import logging
import time

from dotenv import load_dotenv

from storefront.catalog import SEED_PRODUCTS, seed_text, to_vector
from storefront.config import Settings
from storefront.embedding_helper import check_embedding, embed_text
from storefront.errors import VectorStoreUnavailable
from storefront.logging_setup import configure_logging
from storefront.pinecone_client import (
    clear_namespace,
    describe_stats,
    matches_to_products,
    namespace_vector_count,
    semantic_search,
    upsert_vectors,
)

logger = logging.getLogger(__name__)

SAMPLE_QUERY = "wireless headphones for music"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Embed the product catalog and upsert it into Pinecone.")
    parser.add_argument("--clear-delay", type=float, default=2.0,
                        help="Seconds to wait after clearing the namespace")
    parser.add_argument("--index-delay", type=float, default=5.0,
                        help="Seconds to wait for upserted vectors to become queryable")
    parser.add_argument("--dry-run", action="store_true",
                        help="Embed products without touching the index")
    parser.add_argument("--check-embedding", action="store_true",
                        help="Only run a single test embedding and exit")
    parser.add_argument("--log-level", default="", help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def build_vectors(products, settings):
    logger.info(f"Generating embeddings for {len(products)} products ...")
    return [to_vector(p, embed_text(seed_text(p), settings)) for p in products]


def clear_existing(settings, delay):
    namespace = settings.pinecone_namespace
    try:
        stats = describe_stats(settings)
        logger.info(f"Current index stats: {stats}")
    except VectorStoreUnavailable:
        raise
    except Exception as e:
        logger.warning(f"Could not get index stats, proceeding with seeding: {e}")
        return False

    if namespace_vector_count(stats, namespace) > 0:
        clear_namespace(settings, namespace)
        logger.info("Namespace cleared.")
        time.sleep(delay)
        return True
    return False


def log_sample_search(settings, query=SAMPLE_QUERY, top_k=3):
    logger.info(f"Testing semantic search with '{query}' ...")
    results = semantic_search(embed_text(query, settings), settings, top_k=top_k)
    products = matches_to_products(results, include_score=True)
    for i, product in enumerate(products, start=1):
        logger.info(f"{i}. {product['id']} (score: {product['score']:.3f})")
        logger.info(f"   Name: {product['name']}")
        logger.info(f"   Text: {product['description'][:100]}...")
    return products


def seed(settings, clear_delay=2.0, index_delay=5.0, dry_run=False):
    logger.info(f"Starting Pinecone seeding into {settings.pinecone_index_name}/{settings.pinecone_namespace}")
    if not dry_run:
        if not settings.pinecone_configured:
            raise VectorStoreUnavailable("PINECONE_API_KEY is not set")
        clear_existing(settings, clear_delay)

    vectors = build_vectors(SEED_PRODUCTS, settings)
    if dry_run:
        logger.info(f"Dry run: built {len(vectors)} vectors of dimension {settings.embedding_dimension}")
        return vectors

    upsert_vectors(vectors, settings)

    logger.info("Waiting for indexing to complete ...")
    time.sleep(index_delay)
    logger.info(f"Updated index stats: {describe_stats(settings)}")

    log_sample_search(settings)
    logger.info("Pinecone seeding completed successfully!")
    return vectors


def main(argv=None):
    args = parse_args(argv)
    load_dotenv(override=False)
    overrides = {"LOG_LEVEL": args.log_level} if args.log_level else {}
    settings = Settings.from_env(overrides)
    configure_logging(settings.log_level)

    if args.check_embedding:
        check_embedding(settings)
        return 0

    try:
        seed(settings, args.clear_delay, args.index_delay, args.dry_run)
    except Exception as e:
        logger.exception(f"Error seeding Pinecone data: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
