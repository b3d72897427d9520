"""Tests for the list/read/create/update product endpoints."""

import pytest


class TestCreateProduct:
    def test_creates_and_trims_fields(self, client):
        response = client.post(
            "/api/produtos/",
            json={
                "nome": "  Bolo de Cenoura ",
                "descricao": " com cobertura ",
                "preco": 35.5,
                "quantidade": 3,
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["nome"] == "Bolo de Cenoura"
        assert body["descricao"] == "com cobertura"
        assert body["preco"] == 35.5
        assert body["quantidade"] == 3

    def test_blank_name_is_rejected(self, client):
        response = client.post("/api/produtos/", json={"nome": "   "})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Nome do produto é obrigatório",
        }

    def test_price_beyond_column_precision_fails_schema_validation(self, client):
        response = client.post("/api/produtos/", json={"nome": "Broa", "preco": 100_000_000})

        assert response.status_code == 422

    def test_negative_stock_fails_schema_validation(self, client):
        response = client.post("/api/produtos/", json={"nome": "Broa", "quantidade": -1})

        assert response.status_code == 422


class TestReadProducts:
    def test_get_existing_product(self, client, make_produto):
        make_produto("Pão Francês", id=1, preco=0.8, quantidade=120)

        response = client.get("/api/produtos/1")

        assert response.status_code == 200
        assert response.json()["nome"] == "Pão Francês"
        assert response.json()["quantidade"] == 120

    def test_get_invalid_id_is_400(self, client):
        response = client.get("/api/produtos/abc")

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_list_filters_by_name_and_paginates(self, client, make_produto):
        make_produto("Bolo de Chocolate")
        make_produto("Bolo de Fubá")
        make_produto("Pão de Queijo")

        response = client.get("/api/produtos/", params={"nome": "bolo", "page_size": 1})

        body = response.json()
        assert response.status_code == 200
        assert body["total"] == 2
        assert body["page"] == 1
        assert [p["nome"] for p in body["items"]] == ["Bolo de Chocolate"]

        second_page = client.get(
            "/api/produtos/", params={"nome": "bolo", "page": 2, "page_size": 1}
        ).json()
        assert [p["nome"] for p in second_page["items"]] == ["Bolo de Fubá"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"page_size": 501}])
    def test_list_rejects_out_of_range_pagination(self, client, params):
        assert client.get("/api/produtos/", params=params).status_code == 422


class TestUpdateProduct:
    def test_partial_update_keeps_other_fields(self, client, make_produto):
        make_produto("Sonho", id=5, preco=4.0, quantidade=10)

        response = client.put("/api/produtos/5", json={"quantidade": 7})

        assert response.status_code == 200
        body = response.json()
        assert body["nome"] == "Sonho"
        assert body["preco"] == 4.0
        assert body["quantidade"] == 7

    def test_update_missing_product_is_404(self, client):
        response = client.put("/api/produtos/77", json={"nome": "Rosca"})

        assert response.status_code == 404
        assert response.json()["message"] == "Produto não encontrado"

    def test_update_price_beyond_column_precision_is_422(self, client, make_produto):
        make_produto("Sonho", id=5)

        response = client.put("/api/produtos/5", json={"preco": 1e12})

        assert response.status_code == 422

    def test_update_to_blank_name_is_400(self, client, make_produto):
        make_produto("Sonho", id=5)

        response = client.put("/api/produtos/5", json={"nome": " "})

        assert response.status_code == 400
