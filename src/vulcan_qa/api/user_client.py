from __future__ import annotations

import httpx

from vulcan_qa.api.base_client import BaseApiClient

USERS_ENDPOINT = "/api/users"


class UserApiClient(BaseApiClient):
    def get_user_by_id(self, user_id: str | int) -> httpx.Response:
        path = f"{USERS_ENDPOINT}/{user_id}"
        self.logger.info(f"Requesting user by id={user_id} in path={path}")
        return self.get(path)

    def create_user(self, name: str, job: str) -> httpx.Response:
        self.logger.info(f"Creating user name={name} job={job}")
        return self.post(USERS_ENDPOINT, json={"name": name, "job": job})

    def delete_user(self, user_id: str | int) -> httpx.Response:
        path = f"{USERS_ENDPOINT}/{user_id}"
        self.logger.info(f"Deleting user id={user_id}")
        return self.delete(path)
