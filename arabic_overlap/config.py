"""Configuration model and loaders for arabic-overlap.

Responsibilities:
- Define detector configuration as a typed, immutable dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `DetectorConfig`: shingle window and hashing settings for one comparison.
- `ConfigLoader`: static construction helpers for `DetectorConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import clean_token, read_choice, read_flag, read_window_int


DEFAULT_NGRAM_SIZE = 3
DEFAULT_HASH_BASE = 256
DEFAULT_HASH_MODULUS = 1_000_000_007
DEFAULT_HASH_UNIT = "utf8"
SUPPORTED_HASH_UNITS = frozenset({"utf8", "codepoint"})


@dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Settings shared by both documents of a comparison.

    Attributes:
        ngram_size: Shingle window width in code units.
        hash_base: Polynomial rolling-hash base.
        hash_modulus: Rolling-hash modulus; collisions under it count as matches.
        hash_unit: Code unit hashed per window, `utf8` bytes or `codepoint` values.
        fold_alef_maksura: Whether alef maksura is folded into yaa.
    """

    ngram_size: int = DEFAULT_NGRAM_SIZE
    hash_base: int = DEFAULT_HASH_BASE
    hash_modulus: int = DEFAULT_HASH_MODULUS
    hash_unit: str = DEFAULT_HASH_UNIT
    fold_alef_maksura: bool = True

    def validate(self) -> None:
        """Validate configuration values before a detector is built."""

        self._require_positive_int(self.ngram_size, "ngram_size")
        self._require_positive_int(self.hash_base, "hash_base")
        self._require_positive_int(self.hash_modulus, "hash_modulus")
        if self.hash_modulus < 2:
            raise ValueError("`hash_modulus` must be greater than 1.")
        if self.hash_unit not in SUPPORTED_HASH_UNITS:
            supported = ", ".join(sorted(SUPPORTED_HASH_UNITS))
            raise ValueError(
                f"Unsupported `hash_unit` value `{self.hash_unit}`; supported: {supported}."
            )
        if not isinstance(self.fold_alef_maksura, bool):
            raise ValueError("`fold_alef_maksura` must be a boolean value.")

    def with_overrides(
        self,
        *,
        ngram_size: int | None = None,
        hash_unit: str | None = None,
        fold_alef_maksura: bool | None = None,
    ) -> DetectorConfig:
        """Return a validated copy with explicitly provided values replaced."""

        changes: dict[str, Any] = {}
        if ngram_size is not None:
            changes["ngram_size"] = ngram_size
        if hash_unit is not None:
            changes["hash_unit"] = hash_unit
        if fold_alef_maksura is not None:
            changes["fold_alef_maksura"] = fold_alef_maksura
        updated = replace(self, **changes)
        updated.validate()
        return updated

    @staticmethod
    def _require_positive_int(value: object, field_name: str) -> None:
        """Validate that a field holds a strictly positive integer."""

        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"`{field_name}` must be a positive integer.")


class ConfigLoader:
    """Factory methods for creating `DetectorConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "ngram_size",
            "hash_base",
            "hash_modulus",
            "hash_unit",
            "fold_alef_maksura",
        }
    )
    _ENV_KEYS = {
        "ngram_size": "ARABIC_OVERLAP_NGRAM_SIZE",
        "hash_base": "ARABIC_OVERLAP_HASH_BASE",
        "hash_modulus": "ARABIC_OVERLAP_HASH_MODULUS",
        "hash_unit": "ARABIC_OVERLAP_HASH_UNIT",
        "fold_alef_maksura": "ARABIC_OVERLAP_FOLD_ALEF_MAKSURA",
    }

    @staticmethod
    def from_yaml(path: Path, base: DetectorConfig | None = None) -> DetectorConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep the values of `base` (defaults when omitted).
        """

        path_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(path_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            base=base or DetectorConfig(),
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None, base: DetectorConfig | None = None
    ) -> DetectorConfig:
        """Create a validated config from `ARABIC_OVERLAP_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[env_key]
            for key, env_key in ConfigLoader._ENV_KEYS.items()
            if clean_token(env_map.get(env_key)) is not None
        }
        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label="Environment",
            base=base or DetectorConfig(),
        )

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, base: DetectorConfig
    ) -> DetectorConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        config = DetectorConfig(
            ngram_size=read_window_int(
                payload, "ngram_size", source_label=source_label, default=base.ngram_size
            ),
            hash_base=read_window_int(
                payload, "hash_base", source_label=source_label, default=base.hash_base
            ),
            hash_modulus=read_window_int(
                payload, "hash_modulus", source_label=source_label, default=base.hash_modulus
            ),
            hash_unit=read_choice(
                payload,
                "hash_unit",
                source_label=source_label,
                choices=SUPPORTED_HASH_UNITS,
                default=base.hash_unit,
            ),
            fold_alef_maksura=read_flag(
                payload,
                "fold_alef_maksura",
                source_label=source_label,
                default=base.fold_alef_maksura,
            ),
        )
        config.validate()
        return config
