from unittest.mock import MagicMock, patch

import pytest

from storefront.errors import VectorStoreUnavailable
from storefront.pinecone_client import (
    clear_namespace,
    get_index,
    match_to_product,
    namespace_vector_count,
    semantic_search,
    upsert_vectors,
)


def test_get_index_requires_api_key(settings):
    with pytest.raises(VectorStoreUnavailable):
        get_index(settings)


def test_semantic_search_query_shape(pinecone_settings):
    index = MagicMock()
    with patch("storefront.pinecone_client._connect", return_value=index) as mock_connect:
        semantic_search([0.1] * 4, pinecone_settings, top_k=3)

    mock_connect.assert_called_once_with("pc-test", "products")
    index.query.assert_called_once_with(
        vector=[0.1] * 4,
        top_k=3,
        include_metadata=True,
        include_values=False,
        namespace="products",
    )


def test_upsert_vectors_batches(pinecone_settings):
    index = MagicMock()
    vectors = [{"id": f"prod-{i}", "values": [0.0], "metadata": {}} for i in range(5)]
    with patch("storefront.pinecone_client._connect", return_value=index):
        count = upsert_vectors(vectors, pinecone_settings, batch_size=2)

    assert count == 5
    assert [len(c.kwargs["vectors"]) for c in index.upsert.call_args_list] == [2, 2, 1]
    assert all(c.kwargs["namespace"] == "products" for c in index.upsert.call_args_list)


def test_clear_namespace_deletes_all(pinecone_settings):
    index = MagicMock()
    with patch("storefront.pinecone_client._connect", return_value=index):
        clear_namespace(pinecone_settings)
    index.delete.assert_called_once_with(delete_all=True, namespace="products")


def test_namespace_vector_count():
    stats = {"namespaces": {"products": {"vector_count": 35}}}
    assert namespace_vector_count(stats, "products") == 35
    assert namespace_vector_count(stats, "other") == 0
    assert namespace_vector_count({}, "products") == 0


def test_match_to_product_optional_score():
    match = {"id": "prod-3", "score": 0.7, "metadata": {"name": "Tee", "chunk_text": "Soft"}}
    assert "score" not in match_to_product(match)
    product = match_to_product(match, include_score=True)
    assert product["score"] == 0.7
    assert product["description"] == "Soft"
    assert product["price"] == 0
