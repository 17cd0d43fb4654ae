# ABOUTME: Loads the widget configuration from environment variables and an optional .env file.
# ABOUTME: Values are validated through the WidgetConfiguration model.

import os
from collections.abc import Mapping

from dotenv import load_dotenv

from weather_card.models import WidgetConfiguration

ENV_PREFIX = "WEATHER_"

_ENV_FIELDS = {
    "USE_PROFILE_LOCATION": "use_profile_location",
    "LOCATION_FIELD_KEY": "location_field_key",
    "FALLBACK_CITY": "fallback_city",
    "DEFAULT_UNITS": "default_units",
    "SHOW_CREDIT": "show_credit",
}


def config_from_env(environ: Mapping[str, str] | None = None, **overrides) -> WidgetConfiguration:
    """Build a WidgetConfiguration from ``WEATHER_*`` variables.

    When ``environ`` is omitted, a local .env file is loaded first and the
    process environment is read. Keyword overrides win over the environment;
    None overrides are ignored.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    for suffix, field in _ENV_FIELDS.items():
        raw = environ.get(ENV_PREFIX + suffix)
        if raw is not None and raw.strip() != "":
            values[field] = raw.strip().lower() if field == "default_units" else raw
    values.update({k: v for k, v in overrides.items() if v is not None})
    return WidgetConfiguration.model_validate(values)
