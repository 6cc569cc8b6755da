import logging
from typing import Any

from pydantic import BaseModel

from app.exceptions.custom import AuthNotSupportedError, RecordNotFoundError
from app.mappers.user_mapper import TABLE_NAME, USER_PROJECTION, map_user, user_to_record
from app.schemas.query import PagingInfo, QueryParams
from app.schemas.user import User, UserPreferences, UserUpdate
from app.services.base import TableService

logger = logging.getLogger(__name__)

AUTH_MESSAGE = "Authentication is handled by the hosted login component."
REGISTER_MESSAGE = "Registration is handled by the hosted signup component."


class UserService(TableService):
    table_name = TABLE_NAME
    entity = "User"
    projection = USER_PROJECTION

    async def get_by_id(self, user_id: int) -> User:
        return map_user(await self._fetch_one(user_id))

    async def get_current_user(self) -> User:
        """First row of the user table.

        Stand-in until the session identity from the hosted login component
        is wired through; unlike list reads this raises on failure.
        """
        query = QueryParams(fields=USER_PROJECTION, paging_info=PagingInfo(limit=1))
        rows = await self._fetch_many(query, degrade=False)
        if not rows:
            raise RecordNotFoundError(self.entity)
        return map_user(rows[0])

    async def update_profile(self, user_id: int, updates: UserUpdate | dict[str, Any]) -> User:
        values = UserUpdate.model_validate(updates).model_dump(exclude_unset=True)
        await self._update_one(user_id, user_to_record(values))
        return await self.get_by_id(user_id)

    async def update_preferences(
        self, user_id: int, preferences: UserPreferences | dict[str, Any]
    ) -> User:
        if isinstance(preferences, BaseModel):
            preferences = preferences.model_dump(exclude_unset=True)
        return await self.update_profile(user_id, {"preferences": preferences})

    async def upload_avatar(self, user_id: int, avatar_url: str) -> User:
        return await self.update_profile(user_id, {"avatar": avatar_url})

    async def authenticate(self, email: str, password: str) -> User:
        logger.info("Rejected local sign-in for %s", email)
        raise AuthNotSupportedError(AUTH_MESSAGE)

    async def register(self, user_data: dict[str, Any]) -> User:
        raise AuthNotSupportedError(REGISTER_MESSAGE)
