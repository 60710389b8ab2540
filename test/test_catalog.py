from storefront.catalog import (
    MOCK_PRODUCTS,
    SEED_PRODUCTS,
    filter_mock_products,
    seed_text,
    to_vector,
)


def test_seed_products_are_unique_and_complete():
    ids = [p["id"] for p in SEED_PRODUCTS]
    assert ids == [f"prod-{i}" for i in range(1, 36)]
    for product in SEED_PRODUCTS:
        assert set(product) == {"id", "chunk_text", "category", "name", "price", "imageUrl"}


def test_filter_is_case_insensitive():
    assert [p["id"] for p in filter_mock_products("BOTTLE")] == ["4"]
    assert [p["id"] for p in filter_mock_products("clothing")] == ["3"]
    assert filter_mock_products("submarine") == []


def test_filter_matches_description():
    assert [p["id"] for p in filter_mock_products("heart rate")] == ["2"]


def test_to_vector_metadata():
    product = {"id": "x", "name": "Mug", "chunk_text": "Ceramic", "category": "Kitchen", "price": 5}
    vector = to_vector(product, [0.1, 0.2])
    assert seed_text(product) == "Mug Ceramic Kitchen"
    assert vector == {
        "id": "x",
        "values": [0.1, 0.2],
        "metadata": {"name": "Mug", "chunk_text": "Ceramic", "category": "Kitchen",
                     "price": 5, "imageUrl": ""},
    }


def test_mock_products_shape():
    assert len(MOCK_PRODUCTS) == 5
    assert all("description" in p for p in MOCK_PRODUCTS)
