import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from todo.domain.errors import (
    CannotDeleteLastUser,
    ListItemCannotBeEmpty,
    NeedToBeListOwner,
    UserDoesNotExist,
)
from todo.main import create_app

failing = APIRouter(prefix="/test")


@failing.get("/lists/{list_id}")
async def get_list(list_id: int, user_id: int = 3):
    raise NeedToBeListOwner(list_id=list_id, user_id=user_id)


@failing.get("/users/{user_id}")
async def get_user(user_id: int):
    raise UserDoesNotExist(user_id=user_id)


@failing.delete("/users/last")
async def delete_last_user():
    raise CannotDeleteLastUser()


@failing.post("/items")
async def post_item():
    raise ListItemCannotBeEmpty()


@failing.get("/boom")
async def boom():
    raise RuntimeError("unexpected")


@pytest.fixture()
def app():
    app = create_app()
    app.include_router(failing)
    return app


@pytest.fixture()
def client(app):
    return TestClient(app, raise_server_exceptions=False)
