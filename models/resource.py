# models/resource.py

"""
A bookmark in the teacher's resources library: a titled URL with a category and free-form tags.
"""

from __future__ import annotations


class Resource:

    def __init__(
        self,
        title: str,
        url: str,
        category: str = "",
        tags: list[str] | None = None,
        is_favorite: bool = False,
        id: str | None = None,
        owner_id: str | None = None,
    ):
        self._id = id
        self._owner_id = owner_id

        if not isinstance(title, str) or not title.strip():
            raise ValueError("Invalid input. The resource title is required.")
        if not isinstance(url, str) or not url.strip():
            raise ValueError("Invalid input. The resource URL is required.")

        self._title = title.strip()
        self._url = url.strip()
        self._category = (category or "").strip()
        self._tags: list[str] = list(tags or [])
        self._is_favorite = is_favorite

    # === properties ===

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def owner_id(self) -> str | None:
        return self._owner_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def url(self) -> str:
        return self._url

    @property
    def category(self) -> str:
        return self._category

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def is_favorite(self) -> bool:
        return self._is_favorite

    def matches(self, query: str) -> bool:
        query = query.strip().lower()

        return query in self._title.lower() or any(
            query in tag.lower() for tag in self._tags
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "owner_id": self._owner_id,
            "title": self._title,
            "url": self._url,
            "category": self._category,
            "tags": list(self._tags),
            "is_favorite": self._is_favorite,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Resource:
        return cls(
            id=data.get("id"),
            owner_id=data.get("owner_id"),
            title=data["title"],
            url=data["url"],
            category=data.get("category", ""),
            tags=data.get("tags", []),
            is_favorite=data.get("is_favorite", False),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Resource({self._id}, {self._title}, {self._url}, {self._is_favorite})"

    def __str__(self) -> str:
        return f"RESOURCE: {self._title} <{self._url}>"
