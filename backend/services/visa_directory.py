"""In-memory visa directory: the four read-only queries over loaded records."""

import logging
from collections.abc import Iterable

from models.country import CountryReference, CountrySummary
from models.visa import (
    NOT_AVAILABLE,
    CountryVisaRecord,
    PlaceholderVisaInfo,
    VerifiedVisaInfo,
)

logger = logging.getLogger(__name__)


class VisaDirectoryError(Exception):
    status_code = 500
    error = "internal_error"


class DataUnavailable(VisaDirectoryError):
    status_code = 500
    error = "data_unavailable"

    def __init__(self, message: str = "Visa data is not available"):
        super().__init__(message)


class InvalidQuery(VisaDirectoryError):
    status_code = 400
    error = "invalid_query"


class NotFound(VisaDirectoryError):
    status_code = 404
    error = "not_found"


def normalize(value: str | None) -> str:
    return (value or "").strip().lower()


class VisaDirectory:
    """Immutable collection of visa records plus an optional reference table.

    An empty directory is the degraded state: every query raises
    ``DataUnavailable``.
    """

    def __init__(
        self,
        records: Iterable[CountryVisaRecord] = (),
        references: Iterable[CountryReference] = (),
    ):
        self._records = tuple(records)
        self._references = tuple(references)
        self._regions = frozenset(
            r.region for r in self._records if r.region and r.region.strip()
        )

    @property
    def available(self) -> bool:
        return bool(self._records)

    @property
    def record_count(self) -> int:
        return len(self._records)

    @property
    def region_count(self) -> int:
        return len(self._regions)

    def _require_data(self) -> tuple[CountryVisaRecord, ...]:
        if not self._records:
            raise DataUnavailable()
        return self._records

    def list_all(self) -> list[CountryVisaRecord]:
        return list(self._require_data())

    def list_countries(self) -> list[CountrySummary]:
        return [
            CountrySummary(
                name_local=r.name_local,
                name_english=r.name_english,
                region=r.region,
            )
            for r in self._require_data()
        ]

    def list_regions(self) -> list[str]:
        self._require_data()
        return sorted(self._regions)

    def filter_by_region(self, region: str | None = None) -> list[CountryVisaRecord]:
        records = self._require_data()
        if not region:
            return list(records)
        # Region labels match verbatim, no case folding
        return [r for r in records if r.region == region]

    def find_by_country(self, query: str | None) -> VerifiedVisaInfo | PlaceholderVisaInfo:
        records = self._require_data()
        q = normalize(query)
        if not q:
            raise InvalidQuery("Query parameter 'country' is required")

        for attr in ("code", "name_english", "name_local"):
            for record in records:
                if normalize(getattr(record, attr)) == q:
                    return VerifiedVisaInfo.from_record(record)

        for ref in self._references:
            if any(normalize(key) == q for key in ref.lookup_keys):
                logger.info("No visa record for %r, returning placeholder", query)
                return PlaceholderVisaInfo(
                    country_name=ref.name_english or ref.name_local or ref.code,
                    code=ref.code or NOT_AVAILABLE,
                )

        logger.debug("Country not found: %r", query)
        raise NotFound(f"Country not found: {query.strip()}")
