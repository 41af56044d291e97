import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from config import Settings
from models.country import CountryReference
from models.visa import CountryVisaRecord
from services.visa_directory import VisaDirectory
from utils.json_helpers import DataSourceError, read_json_array

logger = logging.getLogger(__name__)


def _parse(path: Path, model: type[BaseModel]) -> list:
    items = read_json_array(path)
    parsed = []
    for i, item in enumerate(items):
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as e:
            first = e.errors()[0]
            raise DataSourceError(path, f"entry {i} is invalid: {first['msg']}") from e
    return parsed


def load_records(path: Path) -> list[CountryVisaRecord]:
    return _parse(path, CountryVisaRecord)


def load_references(path: Path) -> list[CountryReference]:
    return _parse(path, CountryReference)


def build_directory(settings: Settings) -> VisaDirectory:
    """Load the static data files once and build the directory.

    Failures never propagate: a bad visa file yields an empty (degraded)
    directory, a bad countries file only disables placeholder lookups.
    """
    try:
        records = load_records(settings.visa_data_path)
    except DataSourceError as e:
        logger.error("Visa data unavailable, serving degraded: %s (%s)", e.path, e.reason)
        return VisaDirectory()

    if not records:
        logger.error("Visa data unavailable, serving degraded: %s (no records)",
                     settings.visa_data_path)
        return VisaDirectory()

    references: list[CountryReference] = []
    if settings.countries_data_path is not None:
        try:
            references = load_references(settings.countries_data_path)
        except DataSourceError as e:
            logger.warning("Country reference table disabled: %s (%s)", e.path, e.reason)

    directory = VisaDirectory(records, references)
    logger.info(
        "Loaded %d visa records (%d regions) and %d country references",
        directory.record_count, directory.region_count, len(references),
    )
    return directory
