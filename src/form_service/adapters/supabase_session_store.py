"""Supabase-backed session store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from form_service.services.submissions import SessionStore


@dataclass
class SupabaseSessionStore(SessionStore):
    """Key/value session records stored as JSON rows."""

    client: Client
    table: str = "session_store"

    def update_session(
        self, form_url: str, payload: dict[str, object], key: str
    ) -> None:
        """Store form data for a form on the record with the given key."""
        data = self._get_data(key)
        form_data = dict(data.get("form_data") or {})
        form_data[form_url] = payload
        data["form_data"] = form_data
        self._upsert(key, data)

    def update_main_session_with_form_submission(
        self,
        session_id: str,
        transaction_id: str,
        submission_id: str,
        form_path: str,
    ) -> None:
        """Record a submitted form on the main session for polling clients."""
        data = self._get_data(session_id)
        submissions = dict(data.get("form_submissions") or {})
        submissions[form_path] = {
            "submitted": True,
            "submission_id": submission_id,
            "transaction_id": transaction_id,
            "submitted_at": datetime.now(tz=UTC).isoformat(),
        }
        data["form_submissions"] = submissions
        self._upsert(session_id, data)

    def _get_data(self, key: str) -> dict[str, object]:
        response = (
            self.client.table(self.table)
            .select("key, data_json")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return {}
        return dict(response.data[0].get("data_json") or {})

    def _upsert(self, key: str, data: dict[str, object]) -> None:
        self.client.table(self.table).upsert(
            {
                "key": key,
                "data_json": data,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
