from unittest.mock import patch

import pytest

from storefront import seed as seed_module
from storefront.catalog import SEED_PRODUCTS
from storefront.errors import VectorStoreUnavailable


def _patched(**overrides):
    targets = {
        "describe_stats": {"namespaces": {"products": {"vector_count": 35}}},
        "embed_text": [0.1] * 1024,
        "semantic_search": {"matches": [
            {"id": "prod-1", "score": 0.8, "metadata": {"name": "Sony", "chunk_text": "Headphones"}},
        ]},
    }
    targets.update(overrides)
    return targets


def test_seed_clears_embeds_upserts_and_samples(pinecone_settings):
    values = _patched()
    with patch("storefront.seed.time.sleep") as mock_sleep, \
            patch("storefront.seed.describe_stats", return_value=values["describe_stats"]), \
            patch("storefront.seed.clear_namespace") as mock_clear, \
            patch("storefront.seed.embed_text", return_value=values["embed_text"]) as mock_embed, \
            patch("storefront.seed.upsert_vectors") as mock_upsert, \
            patch("storefront.seed.semantic_search", return_value=values["semantic_search"]) as mock_search:
        vectors = seed_module.seed(pinecone_settings, clear_delay=2, index_delay=5)

    mock_clear.assert_called_once_with(pinecone_settings, "products")
    assert [c.args[0] for c in mock_sleep.call_args_list] == [2, 5]
    assert len(vectors) == len(SEED_PRODUCTS) == 35
    mock_upsert.assert_called_once_with(vectors, pinecone_settings)

    first = mock_embed.call_args_list[0].args[0]
    assert first.startswith("Sony WH-1000XM4 Headphones Sony WH-1000XM4 Wireless")
    assert first.endswith(" Electronics")
    assert vectors[0]["metadata"]["price"] == 299.99

    assert mock_search.call_args.kwargs["top_k"] == 3
    assert mock_embed.call_args_list[-1].args[0] == "wireless headphones for music"


def test_seed_skips_clear_for_empty_namespace(pinecone_settings):
    with patch("storefront.seed.time.sleep"), \
            patch("storefront.seed.describe_stats", return_value={"namespaces": {}}), \
            patch("storefront.seed.clear_namespace") as mock_clear, \
            patch("storefront.seed.embed_text", return_value=[0.0] * 1024), \
            patch("storefront.seed.upsert_vectors"), \
            patch("storefront.seed.semantic_search", return_value={"matches": []}):
        seed_module.seed(pinecone_settings)
    mock_clear.assert_not_called()


def test_stats_failure_does_not_stop_seeding(pinecone_settings):
    with patch("storefront.seed.time.sleep"), \
            patch("storefront.seed.describe_stats", side_effect=[RuntimeError("no stats"), {}]), \
            patch("storefront.seed.clear_namespace") as mock_clear, \
            patch("storefront.seed.embed_text", return_value=[0.0] * 1024), \
            patch("storefront.seed.upsert_vectors") as mock_upsert, \
            patch("storefront.seed.semantic_search", return_value={"matches": []}):
        seed_module.seed(pinecone_settings)
    mock_clear.assert_not_called()
    mock_upsert.assert_called_once()


def test_dry_run_does_not_touch_index(pinecone_settings):
    with patch("storefront.seed.describe_stats") as mock_stats, \
            patch("storefront.seed.embed_text", return_value=[0.0] * 1024), \
            patch("storefront.seed.upsert_vectors") as mock_upsert:
        vectors = seed_module.seed(pinecone_settings, dry_run=True)
    assert len(vectors) == 35
    mock_stats.assert_not_called()
    mock_upsert.assert_not_called()


def test_main_exits_nonzero_on_failure(monkeypatch):
    monkeypatch.setenv("PINECONE_API_KEY", "pc-test")
    with patch("storefront.seed.seed", side_effect=RuntimeError("pinecone down")):
        assert seed_module.main([]) == 1


def test_main_check_embedding_only():
    with patch("storefront.seed.check_embedding") as mock_check, \
            patch("storefront.seed.seed") as mock_seed:
        assert seed_module.main(["--check-embedding"]) == 0
    mock_check.assert_called_once()
    mock_seed.assert_not_called()


def test_missing_api_key_fails_before_embedding(settings):
    with patch("storefront.seed.embed_text") as mock_embed, \
            patch("storefront.seed.upsert_vectors") as mock_upsert:
        with pytest.raises(VectorStoreUnavailable):
            seed_module.seed(settings)
    mock_embed.assert_not_called()
    mock_upsert.assert_not_called()


def test_clear_existing_propagates_missing_key(settings):
    with pytest.raises(VectorStoreUnavailable):
        seed_module.clear_existing(settings, delay=0)
