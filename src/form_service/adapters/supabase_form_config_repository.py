"""Supabase-backed form configuration repository."""

from dataclasses import dataclass

from supabase import Client

from form_service.domain.forms import FormDescriptor, FormKind
from form_service.services.cache import Cache
from form_service.services.forms import FormConfigRepository


@dataclass
class SupabaseFormConfigRepository(FormConfigRepository):
    """Supabase implementation for form configuration lookups."""

    client: Client
    cache: Cache
    table: str = "form_configs"
    cache_ttl_seconds: int = 300

    def get_form_config(self, identifier: str) -> FormDescriptor | None:
        """Return a configured form by identifier, using the cache when warm."""
        cache_key = f"form_config:{identifier}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FormDescriptor):
            return cached

        response = (
            self.client.table(self.table)
            .select("url, type, content")
            .eq("url", identifier)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        descriptor = FormDescriptor(
            identifier=identifier,
            url=row.get("url") or identifier,
            kind=FormKind.from_raw(row.get("type")),
            content=row.get("content") or "",
        )
        self.cache.set(cache_key, descriptor, self.cache_ttl_seconds)
        return descriptor
