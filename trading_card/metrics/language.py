import logging
from collections.abc import Iterable

from trading_card.metrics.icon_catalog import DEFAULT_ICON_CATALOG
from trading_card.metrics.icon_catalog import ICON_KEY_EXCEPTIONS
from trading_card.metrics.icon_catalog import Icon
from trading_card.metrics.icon_catalog import IconCatalog
from trading_card.models import ActivitySnapshot
from trading_card.models import DominantLanguage
from trading_card.models import RepositoryCommit

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_COLOR = "#000000"
SPECIAL_CASE_LANGUAGES = frozenset({"java"})

LanguageTally = dict[str, int]


def tally_languages(repositories: Iterable[RepositoryCommit]) -> LanguageTally:
    """Count repositories per primary language.

    Names are merged case-insensitively; the first casing seen is kept for
    display. Repositories without a detected language are skipped.
    """

    display_names: dict[str, str] = {}
    tally: LanguageTally = {}
    for record in repositories:
        if record.language is None or not record.language.name.strip():
            continue
        name = record.language.name.strip()
        display_name = display_names.setdefault(name.lower(), name)
        tally[display_name] = tally.get(display_name, 0) + 1
    return tally


def select_dominant(tally: LanguageTally) -> str | None:
    """Pick the most frequent language, ties broken alphabetically."""

    if not tally:
        return None
    ranked = sorted(
        tally.items(), key=lambda item: (-item[1], item[0].lower(), item[0])
    )
    return ranked[0][0]


def candidate_icon_keys(language_name: str) -> list[str]:
    """Catalog keys to try for a language, in lookup order."""

    normalized = language_name.strip().lower()
    words = normalized.split()
    candidates: list[str] = []

    exception = ICON_KEY_EXCEPTIONS.get(" ".join(words))
    if exception:
        candidates.append(exception)

    candidates.append("".join(words))
    if words:
        candidates.append(words[0])
    if len(words) > 1:
        candidates.append(words[-1])
        candidates.append(words[0][0] + words[1])

    unique: list[str] = []
    for key in candidates:
        if key and key not in unique:
            unique.append(key)
    return unique


def find_icon(language_name: str, catalog: IconCatalog) -> Icon | None:
    for key in candidate_icon_keys(language_name):
        try:
            icon = catalog.lookup(key)
        except Exception:
            logger.debug("Icon lookup failed for key %r", key, exc_info=True)
            return None
        if icon is not None:
            return icon
    return None


def _declared_color(repositories: Iterable[RepositoryCommit], name: str) -> str:
    target = name.lower()
    for record in repositories:
        language = record.language
        if language is None or language.name.strip().lower() != target:
            continue
        if language.color:
            return language.color
    return DEFAULT_LANGUAGE_COLOR


def resolve_dominant_language(
    snapshot: ActivitySnapshot,
    year: int,
    catalog: IconCatalog = DEFAULT_ICON_CATALOG,
) -> DominantLanguage | None:
    """Resolve the year's dominant language and the icon to draw for it.

    The tally covers the repositories the user committed to during the
    snapshot year. A snapshot for a different year holds no data for `year`.
    """

    if snapshot.year != year:
        return None

    name = select_dominant(tally_languages(snapshot.repositories))
    if name is None:
        return None

    declared_color = _declared_color(snapshot.repositories, name)
    if name.lower() in SPECIAL_CASE_LANGUAGES:
        return DominantLanguage(name=name, color=declared_color, is_special_case=True)

    icon = find_icon(name, catalog)
    if icon is None:
        return DominantLanguage(name=name, color=declared_color)

    return DominantLanguage(name=name, color=icon.color, icon_key=icon.slug)
