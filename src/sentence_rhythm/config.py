from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

LOGGER = logging.getLogger(__name__)

DEFAULT_SENTENCE_ENDINGS = ".!?:。…·"
DEFAULT_EXCLUDED_KINDS = ("code", "comment", "link", "url", "heading", "Heading")


class ConfigError(ValueError):
    """Raised when a configuration document has the wrong shape."""


@dataclass(slots=True)
class ColorSettings:
    """Highlight colours per category. Any valid CSS value is accepted."""

    xs: str = "#fff2c8"
    sm: str = "#eadbf6"
    md: str = "#c5f2cd"
    lg: str = "#f9caca"
    xl: str = "#d1f6f4"


@dataclass(slots=True)
class SentenceRhythmConfig:
    """Configuration options for sentence length highlighting."""

    enabled: bool = False
    xs_threshold: int = 2
    sm_threshold: int = 5
    md_threshold: int = 10
    lg_threshold: int = 20
    treat_line_break_as_sentence_end: bool = False
    extra_sentence_endings: str = ""
    excluded_kinds: tuple[str, ...] = DEFAULT_EXCLUDED_KINDS
    colors: ColorSettings = field(default_factory=ColorSettings)

    @property
    def thresholds(self) -> tuple[int, int, int, int]:
        return (self.xs_threshold, self.sm_threshold, self.md_threshold, self.lg_threshold)

    def frozen(self) -> "FrozenConfig":
        """Return an immutable snapshot for a single analysis pass."""
        return FrozenConfig(
            enabled=self.enabled,
            xs_threshold=self.xs_threshold,
            sm_threshold=self.sm_threshold,
            md_threshold=self.md_threshold,
            lg_threshold=self.lg_threshold,
            treat_line_break_as_sentence_end=self.treat_line_break_as_sentence_end,
            extra_sentence_endings=self.extra_sentence_endings,
            excluded_kinds=tuple(self.excluded_kinds),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        data = dict(asdict(self))
        data["excluded_kinds"] = list(self.excluded_kinds)
        return data


@dataclass(frozen=True, slots=True)
class FrozenConfig:
    """Read-once view of the engine-relevant settings."""

    enabled: bool = False
    xs_threshold: int = 2
    sm_threshold: int = 5
    md_threshold: int = 10
    lg_threshold: int = 20
    treat_line_break_as_sentence_end: bool = False
    extra_sentence_endings: str = ""
    excluded_kinds: tuple[str, ...] = DEFAULT_EXCLUDED_KINDS

    @property
    def sentence_endings(self) -> str:
        endings = DEFAULT_SENTENCE_ENDINGS + self.extra_sentence_endings
        if self.treat_line_break_as_sentence_end:
            endings += "\n"
        return endings


_BOOL_FIELDS = {"enabled", "treat_line_break_as_sentence_end"}
_INT_FIELDS = {"xs_threshold", "sm_threshold", "md_threshold", "lg_threshold"}


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(SentenceRhythmConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in _BOOL_FIELDS & kwargs.keys():
        if not isinstance(kwargs[key], bool):
            raise ConfigError(f"'{key}' must be a boolean, got {kwargs[key]!r}.")
    for key in _INT_FIELDS & kwargs.keys():
        value = kwargs[key]
        # bool is an int subclass; thresholds must be real numbers of words.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"'{key}' must be an integer, got {value!r}.")
    if "extra_sentence_endings" in kwargs:
        endings = kwargs["extra_sentence_endings"]
        if isinstance(endings, (list, tuple)):
            endings = "".join(str(item) for item in endings)
        if not isinstance(endings, str):
            raise ConfigError("'extra_sentence_endings' must be a string.")
        kwargs["extra_sentence_endings"] = endings
    if "excluded_kinds" in kwargs:
        kinds = kwargs["excluded_kinds"]
        if isinstance(kinds, str) or not isinstance(kinds, (list, tuple)):
            raise ConfigError("'excluded_kinds' must be a list of strings.")
        kwargs["excluded_kinds"] = tuple(str(kind) for kind in kinds)
    if "colors" in data:
        colors_value = data["colors"]
        if isinstance(colors_value, ColorSettings):
            kwargs["colors"] = colors_value
        elif isinstance(colors_value, Mapping):
            kwargs["colors"] = _build_color_settings(colors_value)
        else:
            raise ConfigError("'colors' must be a mapping of category to colour.")
    return kwargs


def _build_color_settings(data: Mapping[str, Any]) -> ColorSettings:
    colors_allowed = {field.name for field in fields(ColorSettings)}
    filtered = {key: str(data[key]) for key in data if key in colors_allowed}
    return ColorSettings(**filtered)


def _warn_if_unordered(config: SentenceRhythmConfig) -> None:
    thresholds = config.thresholds
    if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
        LOGGER.warning(
            "Thresholds are not strictly ascending (%s); categories may look odd.",
            ", ".join(str(value) for value in thresholds),
        )


def config_from_dict(data: Mapping[str, Any] | None) -> SentenceRhythmConfig:
    """Build a SentenceRhythmConfig from a dictionary-like input."""
    if data is None:
        return SentenceRhythmConfig()
    config = SentenceRhythmConfig(**_build_kwargs(data))
    _warn_if_unordered(config)
    return config


def config_from_yaml(path: str | Path) -> SentenceRhythmConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(contents) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Unable to parse configuration YAML: {exc}") from exc
    if not isinstance(parsed, MutableMapping):
        raise ConfigError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SentenceRhythmConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return SentenceRhythmConfig()
    if not Path(path).exists():
        LOGGER.info("No configuration at %s; using defaults.", path)
        return SentenceRhythmConfig()
    return config_from_yaml(path)


def save_config(config: SentenceRhythmConfig, path: str | Path) -> Path:
    """Persist the configuration as YAML and return the written path."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(config.to_dict(), sort_keys=False), encoding="utf-8")
    LOGGER.debug("Saved configuration to %s", target)
    return target


def toggle_enabled(config: SentenceRhythmConfig) -> SentenceRhythmConfig:
    """Return a copy of the configuration with highlighting flipped."""
    return replace(config, enabled=not config.enabled)


def snapshot(config: SentenceRhythmConfig | FrozenConfig | None) -> FrozenConfig:
    """Read the configuration once so a pass never sees a half-updated record."""
    if config is None:
        return FrozenConfig()
    if isinstance(config, FrozenConfig):
        return config
    return config.frozen()
