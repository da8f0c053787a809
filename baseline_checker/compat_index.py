"""
Feature dataset loading and the compatibility-key reverse index.

The dataset follows the web-features ``data.json`` layout: a mapping of
feature id -> record ``{kind, compat_features?, status?}``.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

SAMPLE_DATASET_PATH = Path(__file__).parent / "data" / "web_features_sample.json"


class DatasetError(Exception):
    """The feature dataset file could not be read or has the wrong shape."""


def build_reverse_index(features: Mapping[str, Any]) -> Dict[str, str]:
    """Map every compatibility key to the id of the feature that lists it.

    Only records of kind ``feature`` with a non-empty ``compat_features`` list
    contribute. If two features list the same key, the later one wins.
    """
    idx: Dict[str, str] = {}
    for feature_id, feat in features.items():
        if not isinstance(feat, Mapping) or feat.get("kind") != "feature":
            continue
        compat_features = feat.get("compat_features")
        if not isinstance(compat_features, list) or not compat_features:
            continue
        for key in compat_features:
            idx[key] = feature_id
    return idx


@dataclass(frozen=True)
class FeatureDataset:
    """Read-only feature records plus their reverse index, built once."""
    features: Mapping[str, Any]
    index: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_features(cls, features: Mapping[str, Any]) -> "FeatureDataset":
        return cls(
            features=MappingProxyType(dict(features)),
            index=MappingProxyType(build_reverse_index(features)),
        )

    def feature_for(self, compat_key: str) -> Optional[str]:
        return self.index.get(compat_key)


def load_feature_dataset(path: Optional[Union[str, Path]] = None) -> FeatureDataset:
    """Load a web-features style JSON file. Defaults to the bundled sample dataset.

    Accepts either the full ``{"features": {...}, ...}`` document or a bare
    feature mapping.
    """
    data_path = Path(path) if path else SAMPLE_DATASET_PATH
    try:
        with open(data_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise DatasetError(f"Could not load feature dataset {data_path}: {e}") from e

    features = data.get("features", data) if isinstance(data, dict) else None
    if not isinstance(features, dict):
        raise DatasetError(f"Feature dataset {data_path} has no feature mapping")

    dataset = FeatureDataset.from_features(features)
    logger.info(
        "Loaded %d features (%d compat keys) from %s",
        len(dataset.features), len(dataset.index), data_path,
    )
    return dataset
