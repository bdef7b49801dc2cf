"""Limits and display defaults for truth-table generation.

The process default is read once from the environment; callers that need
different values build their own ``Settings`` and pass it explicitly.
"""
import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Debug flag - can be set via environment variable TRUTHTAB_DEBUG
TRUTHTAB_DEBUG = os.environ.get("TRUTHTAB_DEBUG", "False").lower() in ("true", "1", "yes")

ENV_PREFIX = "TRUTHTAB_"

# parser recursion grows by about seven frames per nesting level
MAX_DEPTH_CEILING = 100
MAX_HEIGHT_CEILING = 300


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Configuration for parsing, table generation and rendering.

    Attributes:
        max_variables: Largest number of distinct variables a table may have.
            A table has 2^n rows, so this bounds time and memory per request.
        max_expression_length: Longest accepted expression, in characters.
        max_depth: Deepest accepted nesting of parentheses and negations.
            At most MAX_DEPTH_CEILING, which keeps the parser within the interpreter's
            recursion limit.
        max_height: Tallest accepted formula tree, counting binary connectives and
            negations on the longest path. At most MAX_HEIGHT_CEILING, which keeps
            evaluation and translation within the recursion limit.
        true_label: Text used for a true cell when rendering.
        false_label: Text used for a false cell when rendering.
        result_header: Column header of the result column.
    """

    max_variables: int = 20
    max_expression_length: int = 500
    max_depth: int = 64
    max_height: int = 256
    true_label: str = "T"
    false_label: str = "F"
    result_header: str = "result"

    def __post_init__(self) -> None:
        for name in ("max_variables", "max_expression_length", "max_depth", "max_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.max_depth > MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth must be at most {MAX_DEPTH_CEILING}")
        if self.max_height > MAX_HEIGHT_CEILING:
            raise ValueError(f"max_height must be at most {MAX_HEIGHT_CEILING}")
        if self.true_label == self.false_label:
            raise ValueError("true_label and false_label must differ")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``TRUTHTAB_*`` environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``)

        Raises:
            ValueError: If a variable is set to a non-integer or non-positive value.
        """
        if env is None:
            env = os.environ
        settings = cls(
            max_variables=_positive_int(env, "MAX_VARIABLES", cls.max_variables),
            max_expression_length=_positive_int(env, "MAX_EXPRESSION_LENGTH",
                                                cls.max_expression_length),
            max_depth=_positive_int(env, "MAX_DEPTH", cls.max_depth),
            max_height=_positive_int(env, "MAX_HEIGHT", cls.max_height),
        )
        logger.debug("Loaded settings: %s", settings)
        return settings

    def replace(self, **changes) -> "Settings":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Settings from the environment, or the defaults if the environment is invalid."""
    try:
        return Settings.from_env(env)
    except ValueError as e:
        logger.warning("Ignoring invalid truthtab environment settings: %s", e)
        return Settings()


global_settings = load_settings()
