"""
Guardian Configuration Management
==================================

Centralized configuration for the Guardian toolkit using Python
dataclasses and TOML-based persistence.

Every section maps to one ``[table]`` of the TOML file; keys that are
missing fall back to the dataclass defaults and unknown keys are ignored.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Configuration for the password and passphrase generators.

    Length and word-count bounds are enforced at the request boundary;
    the composers themselves trust their input.
    """

    default_length: int = 16
    min_length: int = 8
    max_length: int = 128
    default_word_count: int = 5
    min_word_count: int = 2
    max_word_count: int = 10
    default_separator: str = "-"
    exclude_ambiguous: bool = True
    symbol_alphabet: str = "!@#$%^&*()_+-=[]{};:,.?/"
    wordlist_path: str = ""  # empty -> bundled list


@dataclass(frozen=False, slots=True)
class EstimatorConfig:
    """Configuration for the strength estimator and advice engine."""

    reference_set_path: str = ""  # empty -> bundled set
    advice_min_length: int = 16


@dataclass(frozen=False, slots=True)
class AuditConfig:
    """Parameters for the chi-squared uniformity audit.

    Reference:
        Pearson, K. (1900). On the criterion that a given system of
        deviations from the probable ... Philosophical Magazine, 50(302).
    """

    samples: int = 10_000
    significance: float = 0.01
    shuffle_size: int = 4


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output location, debug mode."""

    log_level: str = "INFO"
    log_file: str = ""  # empty -> console logging only
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class GuardianConfig:
    """Master configuration aggregating all sections.

    Usage:
        >>> config = GuardianConfig.load()                  # from default path
        >>> config = GuardianConfig.load("custom.toml")     # from custom path
        >>> config.generator.default_length
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    estimator: EstimatorConfig = field(default_factory=EstimatorConfig)
    audit: AuditConfig = field(default_factory=AuditConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> GuardianConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`GuardianConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            estimator=cls._build_section(EstimatorConfig, raw.get("estimator", {})),
            audit=cls._build_section(AuditConfig, raw.get("audit", {})),
        )

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

