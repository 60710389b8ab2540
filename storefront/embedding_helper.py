# storefront/embedding_helper.py

import logging
from functools import lru_cache

import requests

from storefront.config import Settings

logger = logging.getLogger(__name__)

TEST_SENTENCE = "This is a test sentence for embedding generation."


@lru_cache(maxsize=4)
def load_local_model(model_name):
    from sentence_transformers import SentenceTransformer

    logger.info(f"Loading local embedding model {model_name} ...")
    model = SentenceTransformer(model_name)
    logger.info(f"Model {model_name} loaded.")
    return model


def pad_embedding(vector, dimension):
    """
    Zero-pad or truncate `vector` to exactly `dimension` floats.
    """
    padded = [float(v) for v in vector[:dimension]]
    padded.extend([0.0] * (dimension - len(padded)))
    return padded


def _parse_hf_response(result):
    # Feature-extraction returns either the vector itself, a batch of one,
    # or an {"embeddings": [...]} object depending on the deployment.
    if isinstance(result, dict) and isinstance(result.get("embeddings"), list):
        embedding = result["embeddings"]
    elif isinstance(result, list) and result and isinstance(result[0], list):
        embedding = result[0]
    elif isinstance(result, list):
        embedding = result
    else:
        raise ValueError(f"Unexpected embedding response format: {type(result).__name__}")

    if not embedding or not all(isinstance(v, (int, float)) for v in embedding):
        raise ValueError("Invalid embedding response format")
    return embedding


def embed_with_huggingface(text, settings):
    response = requests.post(
        settings.hf_inference_url,
        headers={
            "Authorization": f"Bearer {settings.hf_token}",
            "Content-Type": "application/json",
        },
        json={"inputs": text, "options": {"wait_for_model": True}},
        timeout=settings.embedding_timeout,
    )
    if not response.ok:
        raise RuntimeError(f"HF API error ({response.status_code}): {response.text}")
    return _parse_hf_response(response.json())


def embed_with_local_model(text, settings):
    model = load_local_model(settings.local_embedding_model)
    return model.encode(text, normalize_embeddings=True).tolist()


PROVIDERS = {
    "huggingface": embed_with_huggingface,
    "local": embed_with_local_model,
}


def embed_text(text, settings=None):
    """
    Return a list of floats (the embedding), sized to the index dimension.
    Provider failures are logged and yield a zero vector.
    """
    settings = settings or Settings.from_env()
    dimension = settings.embedding_dimension
    try:
        embedding = PROVIDERS[settings.embedding_provider](text, settings)
    except Exception as e:
        logger.error(f"Embedding with {settings.embedding_provider} failed: {e}")
        return [0.0] * dimension
    return pad_embedding(embedding, dimension)


def check_embedding(settings=None):
    settings = settings or Settings.from_env()
    logger.info(f"Testing {settings.embedding_provider} embedding generation ...")
    embedding = embed_text(TEST_SENTENCE, settings)
    non_zero = sum(1 for v in embedding if v != 0)
    first = ", ".join(f"{v:.4f}" for v in embedding[:5])
    logger.info(f"Generated embedding with {len(embedding)} dimensions")
    logger.info(f"First 5 values: [{first}]")
    logger.info(f"Non-zero values: {non_zero}")
    return embedding


if __name__ == "__main__":
    from dotenv import load_dotenv

    from storefront.logging_setup import configure_logging

    load_dotenv()
    configure_logging("INFO")
    check_embedding()
