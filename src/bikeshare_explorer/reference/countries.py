"""Country code -> flag glyph and display name.

Both helpers are total: they never raise and degrade to an empty string or
to the code itself.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import pycountry
from babel import Locale

logger = logging.getLogger(__name__)

#: CLDR data for English display names.
ENGLISH = Locale("en")

# ord("A") + REGIONAL_INDICATOR_OFFSET == U+1F1E6 (REGIONAL INDICATOR SYMBOL LETTER A)
REGIONAL_INDICATOR_OFFSET = 127397


def flag_of(country_code: object) -> str:
    """
    Map a 2-letter ISO code to its regional-indicator flag sequence.

    Args:
        country_code: ISO 3166-1 alpha-2 code, any case (``"no"``, ``"FR"``).

    Returns:
        The flag glyph (``"🇳🇴"``), ``""`` for empty or non-string input, or
        the input unchanged if a character cannot be shifted.
    """
    if not country_code or not isinstance(country_code, str):
        return ""
    try:
        return "".join(chr(REGIONAL_INDICATOR_OFFSET + ord(c)) for c in country_code.upper())
    except (ValueError, OverflowError):
        return country_code


def name_of(country_code: object) -> str:
    """
    Resolve a 2-letter ISO code to an English country name.

    Uses the CLDR region names (``"Kosovo"``, ``"Congo - Kinshasa"``) and
    falls back to ``pycountry``'s common or official name. Unknown codes are
    echoed back unchanged.
    """
    if not country_code or not isinstance(country_code, str):
        return ""
    return _lookup_name(country_code)


@lru_cache(maxsize=512)
def _lookup_name(country_code: str) -> str:
    code = country_code.upper()
    name = ENGLISH.territories.get(code)
    if name:
        return name

    try:
        country = pycountry.countries.get(alpha_2=code)
    except LookupError:
        country = None
    if country is None:
        logger.debug("No country name for code %r", country_code)
        return country_code
    return getattr(country, "common_name", None) or country.name
