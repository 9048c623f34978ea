import re
import threading
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError, field_validator

from simple_hashtag.core import settings
from simple_hashtag.errors import ConfigurationError
from simple_hashtag.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DELIMITER = ","


class _CandidateDelimiter:
    """Splitting and quoting shared by every delimiter kind."""

    @property
    def candidates(self) -> tuple[str, ...]:
        raise NotImplementedError

    @property
    def primary(self) -> str:
        return self.candidates[0]

    @property
    def glue(self) -> str:
        primary = self.primary
        return primary if primary[-1:].isspace() else f"{primary} "

    @cached_property
    def pattern(self) -> re.Pattern[str]:
        # Longest first so "; " wins over ";" when both are candidates.
        ordered = sorted(self.candidates, key=len, reverse=True)
        return re.compile("|".join(re.escape(candidate) for candidate in ordered))

    def occurs_in(self, text: str) -> bool:
        return any(candidate in text for candidate in self.candidates)


@dataclass(frozen=True)
class Single(_CandidateDelimiter):
    """One delimiter string, e.g. ``","`` or ``"; "``."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ConfigurationError(f"Delimiter must be a non-empty string, got {self.value!r}.")

    @property
    def candidates(self) -> tuple[str, ...]:
        return (self.value,)


@dataclass(frozen=True)
class AnyOf(_CandidateDelimiter):
    """
    A set of candidate delimiters; any one of them ends a token.

    The first candidate is the one used when rendering a list back to text.
    """

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ConfigurationError("Delimiter set must contain at least one candidate.")
        for candidate in self.values:
            if not isinstance(candidate, str) or not candidate:
                raise ConfigurationError(
                    f"Delimiter candidates must be non-empty strings, got {candidate!r}."
                )
        # Keep first occurrence order; the first entry is the output delimiter.
        object.__setattr__(self, "values", tuple(dict.fromkeys(self.values)))

    @property
    def candidates(self) -> tuple[str, ...]:
        return self.values


Delimiter = Single | AnyOf


def coerce_delimiter(value: Any) -> Delimiter:
    if isinstance(value, (Single, AnyOf)):
        return value
    if isinstance(value, str):
        return Single(value)
    if isinstance(value, (list, tuple)):
        return AnyOf(tuple(value))
    raise ConfigurationError(
        f"Delimiter must be a string or a list of strings, got {type(value).__name__}."
    )


class TagConfiguration(BaseModel):
    """Immutable settings read by the parser and by TagList."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    delimiter: Delimiter = Single(DEFAULT_DELIMITER)
    force_lowercase: StrictBool = False
    force_parameterize: StrictBool = False
    strict_case_match: StrictBool = False
    remove_unused_tags: StrictBool = False

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid tag configuration: {exc}") from exc

    @field_validator("delimiter", mode="plain")
    @classmethod
    def _validate_delimiter(cls, value: Any) -> Delimiter:
        return coerce_delimiter(value)

    @property
    def glue(self) -> str:
        return self.delimiter.glue


_configuration: TagConfiguration | None = None
_configuration_lock = threading.Lock()


def setup(configuration: TagConfiguration | None = None, **fields: Any) -> TagConfiguration:
    """
    Install the process-wide configuration.

    Call once at startup, before any tags are parsed. Either pass a ready
    TagConfiguration or the fields to build one from; the two are exclusive.
    """
    global _configuration

    if configuration is not None and fields:
        raise ConfigurationError("Pass either a TagConfiguration or keyword fields, not both.")
    if configuration is None:
        configuration = TagConfiguration(**fields)

    with _configuration_lock:
        _configuration = configuration
    logger.info(
        "[CONFIG] Tag configuration installed: delimiter=%r glue=%r.",
        configuration.delimiter,
        configuration.glue,
    )
    return configuration


def get_configuration() -> TagConfiguration:
    global _configuration

    if _configuration is None:
        with _configuration_lock:
            if _configuration is None:
                _configuration = TagConfiguration()
    return _configuration


def reset() -> None:
    global _configuration

    with _configuration_lock:
        _configuration = None


def from_environment() -> TagConfiguration:
    """Build a configuration from the environment, after loading .env and config.yaml into it."""
    settings.load_environment()

    fields: dict[str, Any] = {}

    candidates = settings.get_env_str("TAG_DELIMITERS")
    delimiter = settings.get_env_str("TAG_DELIMITER")
    if candidates is not None:
        # Each character is one candidate.
        fields["delimiter"] = AnyOf(tuple(candidates))
        if delimiter is not None:
            logger.warning("[ENV] TAG_DELIMITERS is set; ignoring TAG_DELIMITER=%r.", delimiter)
    elif delimiter is not None:
        fields["delimiter"] = Single(delimiter)

    fields["force_lowercase"] = settings.get_env_bool("TAG_FORCE_LOWERCASE")
    fields["force_parameterize"] = settings.get_env_bool("TAG_FORCE_PARAMETERIZE")
    fields["strict_case_match"] = settings.get_env_bool("TAG_STRICT_CASE_MATCH")
    fields["remove_unused_tags"] = settings.get_env_bool("TAG_REMOVE_UNUSED")

    return TagConfiguration(**fields)


def log_configuration(configuration: TagConfiguration | None = None) -> None:
    active = configuration or get_configuration()
    logger.info("[CONFIG] delimiter=%r", active.delimiter)
    logger.info("[CONFIG] glue=%r", active.glue)
    logger.info("[CONFIG] force_lowercase=%s", active.force_lowercase)
    logger.info("[CONFIG] force_parameterize=%s", active.force_parameterize)
    logger.info("[CONFIG] strict_case_match=%s", active.strict_case_match)
    logger.info("[CONFIG] remove_unused_tags=%s", active.remove_unused_tags)
