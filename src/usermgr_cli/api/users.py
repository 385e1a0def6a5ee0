"""Users collection endpoints."""

from typing import Any

from usermgr_cli.api.client import APIClient


class UsersAPI:
    """Users API client.

    ``GET /``, ``POST /``, ``PUT /{id}`` and ``DELETE /{id}`` relative to the
    configured collection URL.
    """

    def __init__(self, client: APIClient):
        self.client = client

    async def list_users(self) -> list[dict[str, Any]]:
        """List every user in the collection."""
        response = await self.client.get()
        return response.json()

    async def create_user(self, user: dict[str, Any]) -> dict[str, Any]:
        """Create a user; the body carries the client-assigned id."""
        response = await self.client.post(json=user)
        return response.json()

    async def update_user(self, user_id: int, user: dict[str, Any]) -> dict[str, Any]:
        """Replace the user stored under *user_id*."""
        response = await self.client.put(f"/{user_id}", json=user)
        return response.json()

    async def delete_user(self, user_id: int) -> None:
        """Delete the user stored under *user_id*."""
        await self.client.delete(f"/{user_id}")
