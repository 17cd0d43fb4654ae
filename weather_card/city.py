# ABOUTME: Decides which city string to look up for the current user.
# ABOUTME: Prefers the user's profile field and silently falls back to the configured city.

import logging
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from weather_card.models import DEFAULT_CITY, DEFAULT_LOCATION_FIELD, WidgetConfiguration

logger = logging.getLogger(__name__)


@runtime_checkable
class ProfileProvider(Protocol):
    """Read access to fields of the signed-in user's profile."""

    async def get_field(self, key: str) -> str | None: ...


class StaticProfileProvider:
    """Profile provider backed by a fixed mapping of field name to value."""

    def __init__(self, fields: Mapping[str, str | None] | None = None):
        self._fields = dict(fields or {})

    async def get_field(self, key: str) -> str | None:
        return self._fields.get(key)


async def resolve_city(config: WidgetConfiguration, profile_provider: ProfileProvider | None) -> str:
    """Return the city name to geocode.

    A missing profile field, a blank value, and a failing provider all lead to
    the same silent fallback: the configured fallback city, or DEFAULT_CITY
    when that is blank too.
    """
    if config.use_profile_location and profile_provider is not None:
        key = config.location_field_key or DEFAULT_LOCATION_FIELD
        try:
            value = await profile_provider.get_field(key)
        except Exception:
            logger.debug("Profile lookup for %r failed, using fallback city", key, exc_info=True)
            value = None
        if isinstance(value, str) and value.strip():
            return value.strip()
        logger.debug("Profile field %r is empty, using fallback city", key)

    return (config.fallback_city or "").strip() or DEFAULT_CITY
