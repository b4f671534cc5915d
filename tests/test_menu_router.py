"""
Tests for the menu API.
"""
import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from canteen.models.menu import Food, Menu

MISSING_ID = "00000000-0000-0000-0000-000000000000"


class TestReadMenus:
    """Reading menus needs no authentication."""

    def test_list(self, client: TestClient, sample_menu: Menu):
        response = client.get("/api/menu")

        assert response.status_code == 200
        menus = response.json()
        assert len(menus) == 1
        assert menus[0]["name"] == "Breakfast Menu"
        food = menus[0]["foods"][0]
        assert food["name"] == "Omelette Sandwich"
        assert Decimal(food["price"]) == Decimal("15.99")
        assert food["additions"][0]["name"] == "Mayo"

    def test_details(self, client: TestClient, sample_menu: Menu):
        response = client.get(f"/api/menu/{sample_menu.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(sample_menu.id)

    def test_details_invalid_id(self, client: TestClient):
        assert client.get("/api/menu/123").status_code == 400

    def test_details_missing(self, client: TestClient):
        response = client.get(f"/api/menu/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json()["detail"] == f"Menu with ID: {MISSING_ID} was not found"


class TestPermissionChecks:
    def test_anonymous(self, client: TestClient):
        assert client.post("/api/menu", json={"name": "Lunch"}).status_code == 401

    def test_standard_user(self, client: TestClient, standard_headers: dict):
        assert client.post("/api/menu", json={"name": "Lunch"}, headers=standard_headers).status_code == 403

    @pytest.mark.parametrize("method,path,body", [
        ("post", "/api/menu", {"name": "Lunch"}),
        ("patch", f"/api/menu/{MISSING_ID}", {"name": "Lunch"}),
        ("delete", "/api/menu", {"ids": [MISSING_ID]}),
        ("post", f"/api/menu/{MISSING_ID}/food", {"name": "Soup", "price": 3}),
    ])
    def test_admin_without_permission(self, client: TestClient, limited_admin_headers: dict, method, path, body):
        response = client.request(method, path, json=body, headers=limited_admin_headers)

        assert response.status_code == 403


class TestCreateMenu:
    def test_create_with_foods(self, client: TestClient, admin_headers: dict, db: Session):
        response = client.post(
            "/api/menu",
            json={
                "name": " Lunch ",
                "foods": [
                    {"name": "Tomato Soup", "price": "4.50", "additions": [{"name": "Bread", "price": "0.50"}]},
                    {"name": "Goulash", "price": 9, "description": "With dumplings"},
                ],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        menu = db.get(Menu, uuid.UUID(response.json()["id"]))
        assert menu.name == "Lunch"
        assert sorted(f.name for f in menu.foods) == ["Goulash", "Tomato Soup"]
        soup = next(f for f in menu.foods if f.name == "Tomato Soup")
        assert [a.name for a in soup.additions] == ["Bread"]

    def test_create_empty_menu(self, client: TestClient, admin_headers: dict):
        response = client.post("/api/menu", json={"name": "Dinner"}, headers=admin_headers)

        assert response.status_code == 201

    @pytest.mark.parametrize("body", [
        {"name": "ab"},
        {},
        {"name": "Lunch", "foods": [{"name": "Soup", "price": -1}]},
    ])
    def test_invalid_menu(self, client: TestClient, admin_headers: dict, body: dict):
        assert client.post("/api/menu", json=body, headers=admin_headers).status_code == 400


class TestCreateFood:
    def test_add_food(self, client: TestClient, admin_headers: dict, sample_menu: Menu, db: Session):
        response = client.post(
            f"/api/menu/{sample_menu.id}/food",
            json={"name": "Pancakes", "price": "7.25", "additions": [{"name": "Syrup", "price": "0.30"}]},
            headers=admin_headers,
        )

        assert response.status_code == 201
        db.refresh(sample_menu)
        assert sorted(f.name for f in sample_menu.foods) == ["Omelette Sandwich", "Pancakes"]

    def test_validation_errors_listed(self, client: TestClient, admin_headers: dict, sample_menu: Menu):
        response = client.post(
            f"/api/menu/{sample_menu.id}/food",
            json={"name": "Pa", "additions": [{"name": "Sy", "price": 1}]},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["detail"] == [
            "Food name has to be at least 3 characters long",
            "Food price is required",
            "Food addition name has to be at least 3 characters long",
        ]

    def test_missing_menu(self, client: TestClient, admin_headers: dict):
        response = client.post(
            f"/api/menu/{MISSING_ID}/food",
            json={"name": "Pancakes", "price": 7},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Menu not found"

    def test_update_not_implemented(self, client: TestClient, admin_headers: dict, sample_menu: Menu):
        food = sample_menu.foods[0]

        response = client.post(
            f"/api/menu/{sample_menu.id}/food",
            json={"id": str(food.id), "name": "Omelette", "price": 10},
            headers=admin_headers,
        )

        assert response.status_code == 501


class TestChangeName:
    def test_rename(self, client: TestClient, admin_headers: dict, sample_menu: Menu, db: Session):
        response = client.patch(f"/api/menu/{sample_menu.id}", json={"name": "Morning Menu"}, headers=admin_headers)

        assert response.status_code == 200
        db.refresh(sample_menu)
        assert sample_menu.name == "Morning Menu"

    def test_short_name(self, client: TestClient, admin_headers: dict, sample_menu: Menu):
        response = client.patch(f"/api/menu/{sample_menu.id}", json={"name": "AM"}, headers=admin_headers)

        assert response.status_code == 400

    def test_missing_menu(self, client: TestClient, admin_headers: dict):
        response = client.patch(f"/api/menu/{MISSING_ID}", json={"name": "Morning Menu"}, headers=admin_headers)

        assert response.status_code == 404

    def test_malformed_id(self, client: TestClient, admin_headers: dict):
        response = client.patch("/api/menu/breakfast", json={"name": "Morning Menu"}, headers=admin_headers)

        assert response.status_code == 400


class TestDeleteMenus:
    def test_delete_keeps_foods(self, client: TestClient, admin_headers: dict, sample_menu: Menu, db: Session):
        menu_id = sample_menu.id

        response = client.request("DELETE", "/api/menu", json={"ids": [str(menu_id)]}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": 1}
        db.expire_all()
        assert db.get(Menu, menu_id) is None
        assert db.query(Food).count() == 1

    def test_unknown_ids_ignored(self, client: TestClient, admin_headers: dict):
        response = client.request("DELETE", "/api/menu", json={"ids": [MISSING_ID]}, headers=admin_headers)

        assert response.json() == {"deleted": 0}

    def test_invalid_ids(self, client: TestClient, admin_headers: dict):
        assert client.request("DELETE", "/api/menu", json={"ids": ["x"]}, headers=admin_headers).status_code == 400
        assert client.request("DELETE", "/api/menu", json={"ids": []}, headers=admin_headers).status_code == 400
