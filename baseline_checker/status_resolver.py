"""
Baseline status lookup and the shared classification step.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Set, Tuple

from .compat_index import FeatureDataset
from .issue import (
    BaselineIssue,
    DEFAULT_MIN_LEVEL,
    IssueKind,
    Location,
    meets_minimum,
    validate_min_level,
)

logger = logging.getLogger(__name__)

# resolve(feature_id, compat_key) -> {baseline, baseline_low_date?, baseline_high_date?, support?}
StatusResolver = Callable[[str, str], Optional[Mapping[str, Any]]]


class StatusNotFound(LookupError):
    """No status is known for the requested feature."""


class DatasetStatusResolver:
    """Resolve statuses from the inline ``status`` blocks of the feature dataset.

    A per-key entry under ``status.by_compat_key`` wins over the feature-wide
    status. Unknown feature ids (including the empty id used for unmapped keys)
    raise StatusNotFound.
    """

    def __init__(self, dataset: FeatureDataset):
        self.dataset = dataset

    def __call__(self, feature_id: str, compat_key: str) -> Optional[Mapping[str, Any]]:
        feat = self.dataset.features.get(feature_id) if feature_id else None
        if not isinstance(feat, Mapping):
            raise StatusNotFound(f"No feature {feature_id!r} for {compat_key}")
        status = feat.get("status")
        if not isinstance(status, Mapping):
            return None
        by_key = status.get("by_compat_key")
        if isinstance(by_key, Mapping) and isinstance(by_key.get(compat_key), Mapping):
            return by_key[compat_key]
        return status


def dedupe_key(compat_key: str, location: Optional[Location]) -> str:
    if location is None:
        return f"{compat_key}@None:None"
    return f"{compat_key}@{location.line}:{location.column}"


class BaselineClassifier:
    """Index lookup + status query + minimum-level check, shared by all extractors.

    The classifier itself is immutable after construction; the de-duplication
    set is passed in by each extractor call.
    """

    def __init__(
        self,
        dataset: FeatureDataset,
        resolver: Optional[StatusResolver] = None,
        min_level: str = DEFAULT_MIN_LEVEL,
    ):
        self.dataset = dataset
        self.resolver: StatusResolver = resolver or DatasetStatusResolver(dataset)
        self.min_level = validate_min_level(min_level)

    def with_min_level(self, min_level: str) -> "BaselineClassifier":
        if min_level == self.min_level:
            return self
        return BaselineClassifier(self.dataset, self.resolver, min_level)

    def resolve(self, compat_key: str) -> Tuple[Optional[str], Optional[Mapping[str, Any]]]:
        """Return (feature_id, status). Resolver failures mean 'status unknown'."""
        feature_id = self.dataset.feature_for(compat_key)
        try:
            status = self.resolver(feature_id or "", compat_key)
        except Exception as e:
            logger.debug("No status for %s (%s): %s", compat_key, feature_id, e)
            status = None
        return feature_id, status

    def classify(
        self,
        compat_key: str,
        location: Optional[Location],
        kind: IssueKind,
        prop: str,
        seen: Set[str],
        value: Optional[str] = None,
    ) -> Optional[BaselineIssue]:
        """Return an issue if the usage is below the minimum level and not seen yet."""
        feature_id, status = self.resolve(compat_key)
        baseline = status.get("baseline", False) if status else False
        if baseline is None:
            baseline = False
        if meets_minimum(baseline, self.min_level):
            return None

        key = dedupe_key(compat_key, location)
        if key in seen:
            return None
        seen.add(key)

        support = status.get("support") if status else None
        return BaselineIssue(
            kind=kind,
            property=prop,
            value=value,
            compat_key=compat_key,
            feature_id=feature_id,
            detected_baseline=baseline,
            baseline_low_date=status.get("baseline_low_date") if status else None,
            baseline_high_date=status.get("baseline_high_date") if status else None,
            location=location,
            support=dict(support) if isinstance(support, Mapping) else None,
        )
