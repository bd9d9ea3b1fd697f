"""Per-type normalization of raw values onto a 0-100 magnitude scale."""

import logging
import math
import numbers
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Dict, NamedTuple, Optional

import pendulum

from .criteria import (
    BooleanCriterion,
    Criterion,
    DateCriterion,
    EnumCriterion,
    NumericCriterion,
)
from .resolver import ABSENT

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0

_TRUE_STRINGS = {"true", "yes", "y", "sim", "s", "1"}
_FALSE_STRINGS = {"false", "no", "n", "nao", "não", "0"}


class NormalizedValue(NamedTuple):
    """Normalized score and whether a substitute was used to get it."""

    score: float
    used_default: bool = False


def reference_time(now: Optional[datetime] = None) -> datetime:
    """Aware reference time: the current UTC time, or ``now`` with naive values taken as UTC."""
    if now is None:
        return pendulum.now("UTC")
    if now.tzinfo is None:
        return pendulum.instance(now, tz="UTC")
    return now


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


class BaseNormalizer(ABC):
    """Base class for type-specific normalizers."""

    @abstractmethod
    def normalize(
        self, value: Any, criterion: Criterion, now: Optional[datetime] = None
    ) -> NormalizedValue:
        """
        Map a raw value onto 0-100.

        Higher always means larger, more recent, a higher option or true.
        Direction is applied later by the scorer.

        Args:
            value: Raw value or ``ABSENT``
            criterion: Criterion carrying the normalization parameters
            now: Reference time for date criteria

        Returns:
            Normalized value between 0 and 100
        """
        pass


class NumericNormalizer(BaseNormalizer):
    """Linear position of the clamped value inside ``[min, max]``."""

    @staticmethod
    def coerce(value: Any) -> Optional[float]:
        """Return ``value`` as a finite float, or None when it is not a number."""
        if value is ABSENT or isinstance(value, bool):
            return None
        if isinstance(value, numbers.Real):
            try:
                number = float(value)
            except OverflowError:
                return None
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                return None
        else:
            return None
        return number if math.isfinite(number) else None

    def normalize(
        self, value: Any, criterion: NumericCriterion, now: Optional[datetime] = None
    ) -> NormalizedValue:
        params = criterion.normalization_config
        number = self.coerce(value)
        used_default = number is None
        if used_default:
            if value is not ABSENT:
                logger.debug(
                    "Criterion %s: %r is not numeric, using default %s",
                    criterion.id, value, params.fallback,
                )
            number = params.fallback

        if params.max == params.min:
            return NormalizedValue(100.0, used_default)

        clamped = max(params.min, min(params.max, number))
        score = (clamped - params.min) / (params.max - params.min) * 100
        return NormalizedValue(_clamp(score), used_default)


class DateNormalizer(BaseNormalizer):
    """Recency inside a window of ``max`` days: today scores 100, the edge 0."""

    @staticmethod
    def coerce(value: Any) -> Optional[datetime]:
        """Return ``value`` as an aware datetime, or None when it is not a date."""
        if value is ABSENT:
            return None
        if isinstance(value, str):
            try:
                value = pendulum.parse(value.strip())
            except (ValueError, TypeError):
                return None
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return pendulum.instance(value, tz="UTC")
            return value
        if isinstance(value, date):
            return pendulum.datetime(value.year, value.month, value.day, tz="UTC")
        return None

    def normalize(
        self, value: Any, criterion: DateCriterion, now: Optional[datetime] = None
    ) -> NormalizedValue:
        moment = self.coerce(value)
        if moment is None:
            if value is not ABSENT:
                logger.debug("Criterion %s: %r is not a date, scoring 0", criterion.id, value)
            return NormalizedValue(0.0, True)

        now = reference_time(now)
        window = criterion.normalization_config.max
        age_days = (now - moment).total_seconds() / SECONDS_PER_DAY
        return NormalizedValue(_clamp(100 - (age_days / window) * 100), False)


class EnumNormalizer(BaseNormalizer):
    """Position of the value in the ordered option list."""

    def normalize(
        self, value: Any, criterion: EnumCriterion, now: Optional[datetime] = None
    ) -> NormalizedValue:
        options = criterion.options
        key = None if value is ABSENT else str(value)
        if key is None or key not in options:
            default = criterion.normalization_config.default_value
            if key is not None:
                logger.debug(
                    "Criterion %s: %r is not one of %s, using percentile %s",
                    criterion.id, value, options, default,
                )
            return NormalizedValue(_clamp(default), True)

        if len(options) == 1:
            return NormalizedValue(100.0, False)
        return NormalizedValue(options.index(key) / (len(options) - 1) * 100, False)


class BooleanNormalizer(BaseNormalizer):
    """True scores 100, false scores 0."""

    @staticmethod
    def coerce(value: Any) -> Optional[bool]:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
        return None

    def normalize(
        self, value: Any, criterion: BooleanCriterion, now: Optional[datetime] = None
    ) -> NormalizedValue:
        flag = None if value is ABSENT else self.coerce(value)
        used_default = flag is None
        if used_default:
            if value is not ABSENT:
                logger.debug("Criterion %s: %r is not a boolean, using default", criterion.id, value)
            flag = criterion.normalization_config.default_value
        return NormalizedValue(100.0 if flag else 0.0, used_default)


NORMALIZERS: Dict[str, BaseNormalizer] = {
    "numeric": NumericNormalizer(),
    "date": DateNormalizer(),
    "enum": EnumNormalizer(),
    "boolean": BooleanNormalizer(),
}


def normalize(value: Any, criterion: Criterion, now: Optional[datetime] = None) -> NormalizedValue:
    """Normalize ``value`` with the normalizer registered for the criterion's type."""
    return NORMALIZERS[criterion.type].normalize(value, criterion, now)
