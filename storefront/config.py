# storefront/config.py

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

EMBEDDING_PROVIDERS = ("huggingface", "local")
HF_ROUTER_URL = "https://router.huggingface.co/hf-inference/models/{model}/pipeline/feature-extraction"


def _to_bool(value, default=False):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return default


def _to_int(value, default):
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return default


def _to_list(value):
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = str(value).split(",")
    return tuple(item.strip() for item in items if str(item).strip())


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    debug: bool

    pinecone_api_key: str
    pinecone_index_name: str
    pinecone_namespace: str

    embedding_provider: str
    hf_token: str
    hf_model: str
    hf_inference_url: str
    local_embedding_model: str
    embedding_dimension: int
    embedding_timeout: int

    products_top_k: int
    search_top_k: int
    cors_origins: tuple

    @classmethod
    def from_env(cls, overrides=None):
        """
        Build settings from overrides first, then the environment, then defaults.
        Override keys may be given upper- or lower-case.
        """
        overrides = overrides or {}

        def pick(name, default=""):
            if name in overrides:
                return overrides[name]
            if name.lower() in overrides:
                return overrides[name.lower()]
            return os.getenv(name, default)

        provider = str(pick("EMBEDDING_PROVIDER", "huggingface")).strip().lower()
        if provider not in EMBEDDING_PROVIDERS:
            logger.warning(f"Unknown EMBEDDING_PROVIDER '{provider}', using huggingface")
            provider = "huggingface"

        hf_model = str(pick("HF_MODEL", "BAAI/bge-base-en-v1.5")).strip() or "BAAI/bge-base-en-v1.5"
        hf_url = str(pick("HF_INFERENCE_URL", "")).strip() or HF_ROUTER_URL.format(model=hf_model)

        return cls(
            host=str(pick("HOST", "0.0.0.0")).strip() or "0.0.0.0",
            port=_to_int(pick("PORT", 3001), 3001),
            log_level=str(pick("LOG_LEVEL", "INFO")).strip().upper() or "INFO",
            debug=_to_bool(pick("DEBUG", False)),
            pinecone_api_key=str(pick("PINECONE_API_KEY", "")).strip(),
            pinecone_index_name=str(pick("PINECONE_INDEX_NAME", "products")).strip() or "products",
            pinecone_namespace=str(pick("PINECONE_NAMESPACE", "products")).strip() or "products",
            embedding_provider=provider,
            hf_token=str(pick("HF_TOKEN", "")).strip(),
            hf_model=hf_model,
            hf_inference_url=hf_url,
            local_embedding_model=str(
                pick("LOCAL_EMBEDDING_MODEL", "sentence-transformers/all-MiniLM-L6-v2")
            ).strip() or "sentence-transformers/all-MiniLM-L6-v2",
            embedding_dimension=_to_int(pick("EMBEDDING_DIMENSION", 1024), 1024),
            embedding_timeout=_to_int(pick("EMBEDDING_TIMEOUT", 30), 30),
            products_top_k=_to_int(pick("PRODUCTS_TOP_K", 50), 50),
            search_top_k=_to_int(pick("SEARCH_TOP_K", 10), 10),
            cors_origins=_to_list(pick("CORS_ORIGINS", "*")) or ("*",),
        )

    @property
    def pinecone_configured(self):
        return bool(self.pinecone_api_key)
