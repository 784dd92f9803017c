import logging
from typing import List, Optional

import httpx
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import DATASET_URL, FETCH_TIMEOUT
from .demo import synthetic_dataset

LOGGER = logging.getLogger(__name__)

COLUMNS = ["year", "month", "variance"]


class DatasetError(Exception):
    """Base class for dataset retrieval problems."""


class DatasetFetchError(DatasetError):
    """The dataset endpoint could not be reached or returned an error status."""


class DatasetValidationError(DatasetError):
    """The payload did not match the expected dataset shape."""


class MonthlyVariance(BaseModel):
    year: int
    month: int = Field(..., ge=1, le=12)
    variance: float


class Dataset(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    base_temperature: float = Field(..., alias="baseTemperature")
    monthly_variance: List[MonthlyVariance] = Field(..., alias="monthlyVariance")

    def years(self) -> List[int]:
        """Distinct years in ascending order, whatever the order of the feed."""
        return sorted({entry.year for entry in self.monthly_variance})

    @property
    def min_year(self) -> Optional[int]:
        years = self.years()
        return years[0] if years else None

    @property
    def max_year(self) -> Optional[int]:
        years = self.years()
        return years[-1] if years else None

    def to_frame(self) -> pd.DataFrame:
        if not self.monthly_variance:
            return pd.DataFrame(columns=COLUMNS)
        return pd.DataFrame([entry.model_dump() for entry in self.monthly_variance], columns=COLUMNS)


def parse_dataset(payload) -> Dataset:
    if not isinstance(payload, dict):
        raise DatasetValidationError(
            f"Dataset must be a JSON object, got {type(payload).__name__}."
        )
    try:
        return Dataset.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise DatasetValidationError(f"Malformed dataset: {problems}") from exc


def fetch_dataset(url: str = DATASET_URL, timeout: float = FETCH_TIMEOUT) -> Dataset:
    """Fetch the monthly variance feed once and validate it.

    Network and HTTP failures raise DatasetFetchError; a payload that does not
    look like the dataset raises DatasetValidationError before any layout is
    attempted.
    """
    try:
        r = httpx.get(url, timeout=timeout)
        r.raise_for_status()
    except httpx.HTTPStatusError as exc:
        LOGGER.warning("Dataset request to %s failed (%s)", url, exc.response.status_code)
        raise DatasetFetchError(
            f"Dataset request failed with status {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        LOGGER.warning("Dataset request to %s errored: %s", url, exc)
        raise DatasetFetchError(f"Dataset request failed: {exc}") from exc
    try:
        payload = r.json()
    except ValueError as exc:
        raise DatasetValidationError("Dataset response is not valid JSON.") from exc
    dataset = parse_dataset(payload)
    LOGGER.info(
        "Dataset fetched from %s: %d entries, base temperature %.2f",
        url,
        len(dataset.monthly_variance),
        dataset.base_temperature,
    )
    return dataset


def load_dataset(use_demo: bool = False, url: str = DATASET_URL) -> Dataset:
    if use_demo:
        LOGGER.info("Demo mode: using synthetic monthly variance")
        return parse_dataset(synthetic_dataset())
    return fetch_dataset(url)
