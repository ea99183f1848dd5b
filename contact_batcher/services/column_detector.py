from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..models.records import ColumnMatch, DetectedColumns

"""Header-based detection of the name and phone columns.

Detection runs a fixed, ordered list of tiers per column kind; the first tier
that produces a match wins. Each tier is plain data (terms + match mode +
scan order) so the priority order can be reviewed in one place:

Name tiers
  1. exact "nombre"
  2. header contains "nombre"
  3. exact synonym (synonym order wins)
  4. header contains a synonym (header order wins)

Phone tiers
  1. exact priority term (term order wins)
  2. header contains a term (header order wins)

Headers containing an excluded term are never selected, at any tier: "rfc"
for names (tax-ID columns), correo/email/e-mail/mail for phones.
"""

__all__ = [
    "HeaderTier",
    "NAME_TIERS",
    "PHONE_TIERS",
    "NAME_EXCLUDED_TERMS",
    "PHONE_EXCLUDED_TERMS",
    "normalize_header",
    "detect_name_column",
    "detect_phone_column",
    "detect_columns",
]

_WHITESPACE = re.compile(r"\s+")


def normalize_header(value: Any) -> str:
    """Lower-case, strip diacritics and collapse whitespace.

    >>> normalize_header("  Teléfono   Móvil ")
    'telefono movil'
    """
    text = "" if value is None else str(value)
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE.sub(" ", stripped).strip()


@dataclass(frozen=True)
class HeaderTier:
    """One heuristic tier.

    ``exact`` compares the whole normalized header to a term, otherwise the
    header only has to contain it. ``terms_first`` makes the term list the
    outer loop (earliest term wins); otherwise headers are scanned left to
    right and the first header matching any term wins.
    """
    terms: tuple[str, ...]
    exact: bool
    terms_first: bool
    reason: str  # formatted with the matched term

    def match(self, headers: Sequence[str], excluded: tuple[str, ...]) -> ColumnMatch | None:
        terms = [normalize_header(t) for t in self.terms]

        def eligible(h: str) -> bool:
            return bool(h) and not any(x in h for x in excluded)

        def hit(h: str, term: str) -> bool:
            return h == term if self.exact else term in h

        if self.terms_first:
            for raw_term, term in zip(self.terms, terms):
                for idx, h in enumerate(headers):
                    if eligible(h) and hit(h, term):
                        return ColumnMatch(index=idx, reason=self.reason.format(term=raw_term))
            return None

        for idx, h in enumerate(headers):
            if not eligible(h):
                continue
            for raw_term, term in zip(self.terms, terms):
                if hit(h, term):
                    return ColumnMatch(index=idx, reason=self.reason.format(term=raw_term))
        return None


NAME_SYNONYMS = (
    "razon social",
    "nombre o razon social",
    "cliente",
    "empresa",
    "contacto",
    "responsable",
    "titular",
)

NAME_EXCLUDED_TERMS = ("rfc",)

NAME_TIERS: tuple[HeaderTier, ...] = (
    HeaderTier(("nombre",), exact=True, terms_first=True, reason='exact match: "{term}"'),
    HeaderTier(("nombre",), exact=False, terms_first=False, reason='contains: "{term}"'),
    HeaderTier(NAME_SYNONYMS, exact=True, terms_first=True, reason='synonym: "{term}"'),
    HeaderTier(NAME_SYNONYMS, exact=False, terms_first=False, reason='partial synonym: "{term}"'),
)

PHONE_EXCLUDED_TERMS = ("correo", "email", "e-mail", "mail")

PHONE_TIERS: tuple[HeaderTier, ...] = (
    HeaderTier(
        ("telefono", "teléfono", "celular", "whatsapp", "movil", "móvil", "tel"),
        exact=True,
        terms_first=True,
        reason='exact match: "{term}"',
    ),
    HeaderTier(
        ("telefono", "celular", "whatsapp", "movil", "tel", "contacto"),
        exact=False,
        terms_first=False,
        reason='contains: "{term}"',
    ),
)


def _run_tiers(
    headers: Sequence[Any], tiers: tuple[HeaderTier, ...], excluded: tuple[str, ...]
) -> ColumnMatch | None:
    normalized = [normalize_header(h) for h in headers]
    for tier in tiers:
        found = tier.match(normalized, excluded)
        if found is not None:
            return found
    return None


def detect_name_column(headers: Sequence[Any]) -> ColumnMatch | None:
    return _run_tiers(headers, NAME_TIERS, NAME_EXCLUDED_TERMS)


def detect_phone_column(headers: Sequence[Any]) -> ColumnMatch | None:
    return _run_tiers(headers, PHONE_TIERS, PHONE_EXCLUDED_TERMS)


def detect_columns(headers: Sequence[Any]) -> DetectedColumns | None:
    """Detect both columns; None when either one cannot be found."""
    name = detect_name_column(headers)
    phone = detect_phone_column(headers)
    if name is None or phone is None:
        return None
    return DetectedColumns(name=name, phone=phone)
