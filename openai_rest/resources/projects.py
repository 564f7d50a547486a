"""Organization projects façade."""
from __future__ import annotations

from typing import Optional

from ..descriptors import ListQuery, ProjectRequest, ProjectUpdate, ProjectUserRequest, ProjectUserUpdate
from .base import Resource, _R, segment


class Projects(Resource[_R]):
    def list(self, query: Optional[ListQuery] = None) -> _R:
        return self._get("/organization/projects", query)

    def create(self, request: ProjectRequest) -> _R:
        return self._post("/organization/projects", request)

    def retrieve(self, project_id: str) -> _R:
        return self._get(self._project(project_id))

    def modify(self, project_id: str, request: ProjectUpdate) -> _R:
        return self._post(self._project(project_id), request)

    def archive(self, project_id: str) -> _R:
        return self._post(f"{self._project(project_id)}/archive")

    def list_users(self, project_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"{self._project(project_id)}/users", query)

    def create_user(self, project_id: str, request: ProjectUserRequest) -> _R:
        return self._post(f"{self._project(project_id)}/users", request)

    def retrieve_user(self, project_id: str, user_id: str) -> _R:
        return self._get(f"{self._project(project_id)}/users/{segment(user_id)}")

    def modify_user(self, project_id: str, user_id: str, request: ProjectUserUpdate) -> _R:
        return self._post(f"{self._project(project_id)}/users/{segment(user_id)}", request)

    def delete_user(self, project_id: str, user_id: str) -> _R:
        return self._delete(f"{self._project(project_id)}/users/{segment(user_id)}")

    @staticmethod
    def _project(project_id: str) -> str:
        return f"/organization/projects/{segment(project_id)}"
