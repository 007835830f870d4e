# tests/unit/presentation/test_api.py
"""
HTTP 路由的测试。

使用显式传入的服务容器创建应用（生命周期不会初始化真实连接），
服务方法均为 AsyncMock。
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock, patch

import pytest
from fastapi.testclient import TestClient

from recipe_hub.application.services import RecipeService, UserService
from recipe_hub.containers import ServicesContainer
from recipe_hub.presentation.api import create_api_application
from recipe_hub_core.exceptions import DuplicateEntityError, EntityNotFoundError
from recipe_hub_core.types import (
    Ingredient,
    IngredientRef,
    Recipe,
    RecipeCreate,
    RecipeIngredient,
    RecipeIngredientCreate,
    User,
    UserCreate,
)

NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
RECIPE = Recipe(
    id="1",
    name="Pancakes",
    description="Fluffy",
    author_id="user1",
    created_at=NOW,
    updated_at=NOW,
    ingredients=[
        RecipeIngredient(
            id="l1",
            recipe_id="1",
            ingredient_id="ing1",
            amount="200g",
            ingredient=Ingredient(id="ing1", name="Flour"),
        )
    ],
)
USER = User(id="user1", name="Ada", email="ada@example.com", created_at=NOW, updated_at=NOW)


@pytest.fixture
def recipe_service():
    service = Mock(spec=RecipeService)
    service.get_all_recipes = AsyncMock(return_value=[RECIPE])
    service.get_recipe_by_id = AsyncMock(return_value=RECIPE)
    service.create_recipe = AsyncMock(return_value=RECIPE)
    service.update_recipe = AsyncMock(return_value=RECIPE)
    service.add_ingredient_to_recipe = AsyncMock(return_value=RECIPE.ingredients[0])
    service.remove_ingredient_from_recipe = AsyncMock(return_value=None)
    service.get_user_recipes = AsyncMock(return_value=[RECIPE])
    return service


@pytest.fixture
def user_service():
    service = Mock(spec=UserService)
    service.get_user_by_id = AsyncMock(return_value=USER)
    service.create_user = AsyncMock(return_value=USER)
    return service


@pytest.fixture
def services(config_service, recipe_service, user_service):
    return ServicesContainer(
        config_service=config_service,
        logger=Mock(),
        user_service=user_service,
        recipe_service=recipe_service,
    )


@pytest.fixture
def client(services):
    with TestClient(create_api_application(services)) as test_client:
        yield test_client


class TestLifespan:
    def test_logs_listening_address(self, services):
        with TestClient(create_api_application(services)):
            pass

        services.logger.info.assert_any_call(
            "> Server listening at http://0.0.0.0:3000 as test"
        )

    def test_injected_container_is_not_closed(self, services):
        with patch(
            "recipe_hub.presentation.api.app.close_connections", new=AsyncMock()
        ) as close:
            with TestClient(create_api_application(services)):
                pass

        close.assert_not_awaited()

    def test_self_initialized_container_is_closed_on_shutdown(self, services):
        with patch(
            "recipe_hub.presentation.api.app.init_services",
            new=AsyncMock(return_value=services),
        ) as init, patch(
            "recipe_hub.presentation.api.app.close_connections", new=AsyncMock()
        ) as close:
            app = create_api_application()
            with TestClient(app):
                assert app.state.services is services

        init.assert_awaited_once()
        close.assert_awaited_once()

    def test_preloaded_configuration_is_passed_to_init(self, services, config_service):
        with patch(
            "recipe_hub.presentation.api.app.init_services",
            new=AsyncMock(return_value=services),
        ) as init, patch(
            "recipe_hub.presentation.api.app.close_connections", new=AsyncMock()
        ):
            with TestClient(create_api_application(config_service=config_service)):
                pass

        init.assert_awaited_once_with(config_service=config_service)


class TestRecipeRoutes:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_list_recipes_uses_camel_case(self, client, recipe_service):
        response = client.get("/recipes")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["authorId"] == "user1"
        assert body[0]["ingredients"][0]["ingredientId"] == "ing1"
        assert body[0]["ingredients"][0]["ingredient"]["name"] == "Flour"
        recipe_service.get_all_recipes.assert_awaited_once()

    def test_get_recipe_by_id(self, client, recipe_service):
        response = client.get("/recipes/1")

        assert response.status_code == 200
        assert response.json()["id"] == "1"
        recipe_service.get_recipe_by_id.assert_awaited_once_with("1")

    def test_get_missing_recipe_returns_404(self, client, recipe_service):
        recipe_service.get_recipe_by_id.return_value = None
        assert client.get("/recipes/404").status_code == 404

    def test_create_recipe(self, client, recipe_service):
        response = client.post(
            "/recipes",
            json={
                "name": "Pancakes",
                "authorId": "user1",
                "ingredients": [{"name": "Flour", "amount": "200g"}],
            },
        )

        assert response.status_code == 201
        recipe_service.create_recipe.assert_awaited_once_with(
            RecipeCreate(
                name="Pancakes",
                description=None,
                author_id="user1",
                ingredients=[
                    RecipeIngredientCreate(
                        amount="200g", ingredient=IngredientRef(name="Flour")
                    )
                ],
            )
        )

    def test_create_recipe_rejects_empty_name(self, client, recipe_service):
        response = client.post("/recipes", json={"name": "", "authorId": "user1"})

        assert response.status_code == 422
        recipe_service.create_recipe.assert_not_awaited()

    def test_update_recipe_forwards_only_sent_fields(self, client, recipe_service):
        response = client.patch("/recipes/1", json={"name": "Crepes"})

        assert response.status_code == 200
        recipe_id, update = recipe_service.update_recipe.await_args.args
        assert recipe_id == "1"
        assert update.model_dump(exclude_unset=True) == {"name": "Crepes"}

    def test_update_rejects_null_name(self, client, recipe_service):
        response = client.patch("/recipes/1", json={"name": None})

        assert response.status_code == 422
        recipe_service.update_recipe.assert_not_awaited()

    def test_update_allows_null_description(self, client, recipe_service):
        response = client.patch("/recipes/1", json={"description": None})

        assert response.status_code == 200
        _, update = recipe_service.update_recipe.await_args.args
        assert update.model_dump(exclude_unset=True) == {"description": None}

    def test_create_recipe_for_unknown_author_returns_404(self, client, recipe_service):
        recipe_service.create_recipe.side_effect = EntityNotFoundError("用户 nobody 不存在")

        response = client.post("/recipes", json={"name": "Soup", "authorId": "nobody"})

        assert response.status_code == 404

    def test_update_missing_recipe_returns_404(self, client, recipe_service):
        recipe_service.update_recipe.side_effect = EntityNotFoundError("食谱 404 不存在")

        response = client.patch("/recipes/404", json={"name": "x"})

        assert response.status_code == 404
        assert response.json() == {"detail": "食谱 404 不存在"}

    def test_add_ingredient(self, client, recipe_service):
        response = client.post(
            "/recipes/1/ingredients",
            json={"ingredient": {"name": "Sugar", "amount": "50g"}},
        )

        assert response.status_code == 201
        assert response.json()["recipeId"] == "1"
        recipe_service.add_ingredient_to_recipe.assert_awaited_once_with(
            "1",
            RecipeIngredientCreate(amount="50g", ingredient=IngredientRef(name="Sugar")),
        )

    def test_remove_ingredient(self, client, recipe_service):
        response = client.delete("/recipes/1/ingredients/ing1")

        assert response.status_code == 204
        recipe_service.remove_ingredient_from_recipe.assert_awaited_once_with(
            "1", "ing1"
        )


class TestUserRoutes:
    def test_list_user_recipes(self, client, recipe_service):
        response = client.get("/users/user1/recipes")

        assert response.status_code == 200
        assert len(response.json()) == 1
        recipe_service.get_user_recipes.assert_awaited_once_with("user1")

    def test_create_user(self, client, user_service):
        response = client.post("/users", json={"name": "Ada", "email": "ada@example.com"})

        assert response.status_code == 201
        assert response.json()["createdAt"].startswith("2024-01-15")
        user_service.create_user.assert_awaited_once_with(
            UserCreate(name="Ada", email="ada@example.com")
        )

    def test_get_missing_user_returns_404(self, client, user_service):
        user_service.get_user_by_id.return_value = None
        assert client.get("/users/nobody").status_code == 404

    def test_duplicate_email_returns_409(self, client, user_service):
        user_service.create_user.side_effect = DuplicateEntityError(
            "UNIQUE constraint failed: users.email"
        )

        response = client.post("/users", json={"email": "ada@example.com"})

        assert response.status_code == 409
        assert "users.email" in response.json()["detail"]
