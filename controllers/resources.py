# controllers/resources.py

from __future__ import annotations

from controllers.base import PageController
from core.response import Response
from core.utils import split_comma_list
from models.resource import Resource


class ResourcesController(PageController):
    """The bookmarks library. Favorites are listed first; search covers titles and tags."""

    def __init__(self, storage):
        super().__init__(storage)
        self._resources: list[Resource] = []
        self._search_query = ""

    def refresh(self) -> None:
        self._resources = self._load_records("resources", Resource.from_dict)

    # === view data ===

    @property
    def search_query(self) -> str:
        return self._search_query

    def search(self, query: str) -> None:
        self._search_query = (query or "").strip()

    @property
    def resources(self) -> list[Resource]:
        matches = [
            r
            for r in self._resources
            if not self._search_query or r.matches(self._search_query)
        ]
        # stable sort keeps storage order within each group
        return sorted(matches, key=lambda r: not r.is_favorite)

    def find_resource(self, resource_id: str) -> Resource | None:
        return next((r for r in self._resources if r.id == resource_id), None)

    # === actions ===

    def add_resource(
        self, title: str, url: str, tags: str = "", category: str = ""
    ) -> Response:
        def action():
            resource = Resource(
                title=title,
                url=url,
                category=category,
                tags=split_comma_list(tags),
            )
            return self._storage.create("resources", resource.to_dict())

        return self._perform(action, detail="Resource added.")

    def toggle_favorite(self, resource_id: str) -> Response:
        resource = self.find_resource(resource_id)

        if resource is None:
            return self._not_found("resource", resource_id)

        return self._perform(
            lambda: self._storage.update(
                "resources", resource_id, {"is_favorite": not resource.is_favorite}
            ),
            detail="Favorite toggled.",
        )

    def delete_resource(self, resource_id: str) -> Response:
        return self._perform(
            lambda: self._storage.delete("resources", resource_id),
            detail="Resource deleted.",
        )
