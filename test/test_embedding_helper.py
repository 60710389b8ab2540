from unittest.mock import MagicMock, patch

import pytest

from storefront.config import Settings
from storefront.embedding_helper import check_embedding, embed_text, pad_embedding


def _hf_response(payload, status_code=200):
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.json.return_value = payload
    response.text = "error body"
    return response


def test_pad_embedding_pads_with_zeros():
    assert pad_embedding([1, 2, 3], 5) == [1.0, 2.0, 3.0, 0.0, 0.0]


def test_pad_embedding_truncates():
    assert pad_embedding(list(range(10)), 4) == [0.0, 1.0, 2.0, 3.0]


@pytest.mark.parametrize("payload", [
    [0.5] * 768,
    [[0.5] * 768],
    {"embeddings": [0.5] * 768},
])
def test_huggingface_response_shapes(settings, payload):
    with patch("storefront.embedding_helper.requests.post", return_value=_hf_response(payload)):
        embedding = embed_text("running shoes", settings)

    assert len(embedding) == 1024
    assert embedding[:768] == [0.5] * 768
    assert embedding[768:] == [0.0] * 256


def test_huggingface_request_shape(settings):
    with patch("storefront.embedding_helper.requests.post") as mock_post:
        mock_post.return_value = _hf_response([0.1, 0.2])
        embed_text("yoga mat", settings)

    args, kwargs = mock_post.call_args
    assert args[0] == settings.hf_inference_url
    assert "BAAI/bge-base-en-v1.5" in args[0]
    assert kwargs["headers"]["Authorization"] == "Bearer hf-test"
    assert kwargs["json"] == {"inputs": "yoga mat", "options": {"wait_for_model": True}}


def test_huggingface_error_yields_zero_vector(settings):
    with patch("storefront.embedding_helper.requests.post", return_value=_hf_response({}, 503)):
        embedding = embed_text("anything", settings)
    assert embedding == [0.0] * 1024


def test_unexpected_format_yields_zero_vector(settings):
    with patch("storefront.embedding_helper.requests.post",
               return_value=_hf_response({"error": "loading"})):
        embedding = embed_text("anything", settings)
    assert embedding == [0.0] * 1024


def test_local_provider_uses_normalized_encoding():
    settings = Settings.from_env({"EMBEDDING_PROVIDER": "local", "EMBEDDING_DIMENSION": 512})
    model = MagicMock()
    model.encode.return_value.tolist.return_value = [0.25] * 384

    with patch("storefront.embedding_helper.load_local_model", return_value=model) as mock_load:
        embedding = embed_text("kitchen blender", settings)

    mock_load.assert_called_once_with("sentence-transformers/all-MiniLM-L6-v2")
    model.encode.assert_called_once_with("kitchen blender", normalize_embeddings=True)
    assert len(embedding) == 512
    assert embedding[383] == 0.25
    assert embedding[384] == 0.0


def test_check_embedding_reports_dimension(settings):
    with patch("storefront.embedding_helper.requests.post", return_value=_hf_response([1.0] * 10)):
        embedding = check_embedding(settings)
    assert len(embedding) == 1024
    assert sum(1 for v in embedding if v) == 10
