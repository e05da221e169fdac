"""
REST Lesson Store - PostgREST client for the hosted backend.

Talks to the backend's auto-generated row API (``/rest/v1/<table>``) with the
service role key, which bypasses row-level security for seeding.

Usage:
    with RestLessonStore(settings.supabase_url, settings.supabase_service_role_key) as store:
        profession = store.get_profession("retiree")
        store.insert_lesson(row)
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from src.lessons.errors import PersistenceError
from src.lessons.schemas import LessonRow, Profession


class RestLessonStore:
    """LessonStore backed by PostgREST endpoints."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            base_url=f"{self.base_url}/rest/v1",
            headers={
                "apikey": service_key,
                "Authorization": f"Bearer {service_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    def __enter__(self) -> "RestLessonStore":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # =========================================================================
    # Internals
    # =========================================================================

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise PersistenceError(f"Backend request failed: {e}") from e

        if response.is_error:
            raise PersistenceError(self._error_message(response))
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull PostgREST's error message out of a failed response."""
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}: {response.text}"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {response.status_code}: {body}"

    def _select(self, table: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        return self._request("GET", f"/{table}", params=params).json()

    # =========================================================================
    # Professions
    # =========================================================================

    def get_profession(self, slug: str) -> Profession | None:
        rows = self._select(
            "professions",
            {"select": "id,name,slug", "slug": f"eq.{slug}", "limit": 1},
        )
        if not rows:
            logger.debug(f"No profession row for slug {slug!r}")
            return None
        return Profession.from_row(rows[0])

    def list_professions(
        self, active_only: bool = True, launch_wave: int | None = None
    ) -> list[Profession]:
        params: dict[str, Any] = {"select": "id,name,slug", "order": "name"}
        if active_only:
            params["is_active"] = "eq.true"
        if launch_wave is not None:
            params["launch_wave"] = f"eq.{launch_wave}"
        return [Profession.from_row(row) for row in self._select("professions", params)]

    # =========================================================================
    # Lessons
    # =========================================================================

    def insert_lesson(self, row: LessonRow) -> None:
        self._request(
            "POST",
            "/lessons",
            json=row.to_payload(),
            headers={"Prefer": "return=minimal"},
        )
        logger.debug(f"Inserted lesson {row.slug} for profession {row.profession_id}")

    def lesson_exists(self, profession_id: str, slug: str) -> bool:
        rows = self._select(
            "lessons",
            {
                "select": "id",
                "profession_id": f"eq.{profession_id}",
                "slug": f"eq.{slug}",
                "limit": 1,
            },
        )
        return bool(rows)

    def list_lessons(self, profession_id: str, published_only: bool = True) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "select": "*",
            "profession_id": f"eq.{profession_id}",
            "order": "order_index",
        }
        if published_only:
            params["is_published"] = "eq.true"
        return self._select("lessons", params)
