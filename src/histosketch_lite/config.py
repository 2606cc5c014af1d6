"""Run-wide sketch configuration.

Three constants fix the behaviour of a run:
    sketch_size    (K)      number of independent sampling slots
    decay_interval (DECAY)  observations between decay events
    decay_lambda   (LAMBDA) aging factor is exp(-LAMBDA) per event

Plus the seed for the per-aggregator parameter generators.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping

from histosketch_lite.domain.errors import ConfigError

DEFAULT_SKETCH_SIZE = 2000
DEFAULT_DECAY_INTERVAL = 500
DEFAULT_DECAY_LAMBDA = 0.02
DEFAULT_SEED = 42

ENV_PREFIX = "HISTOSKETCH_"


@dataclass(frozen=True, slots=True)
class SketchConfig:
    sketch_size: int = DEFAULT_SKETCH_SIZE
    decay_interval: int = DEFAULT_DECAY_INTERVAL
    decay_lambda: float = DEFAULT_DECAY_LAMBDA
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        for name in ("sketch_size", "decay_interval", "seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    f"{name} must be an int, got {type(value).__name__}"
                )
        if isinstance(self.decay_lambda, bool) or not isinstance(
            self.decay_lambda, (int, float)
        ):
            kind = type(self.decay_lambda).__name__
            raise ConfigError(f"decay_lambda must be a number, got {kind}")
        if self.sketch_size < 1:
            raise ConfigError(f"sketch_size must be >= 1, got {self.sketch_size}")
        if self.decay_interval < 1:
            raise ConfigError(
                f"decay_interval must be >= 1, got {self.decay_interval}"
            )
        if not math.isfinite(self.decay_lambda) or self.decay_lambda < 0:
            raise ConfigError(
                f"decay_lambda must be finite and >= 0, got {self.decay_lambda}"
            )
        if math.exp(-self.decay_lambda) == 0.0:
            raise ConfigError(
                f"decay_lambda={self.decay_lambda} underflows the decay factor to 0"
            )

    @property
    def decay_factor(self) -> float:
        """Multiplier applied to weights and best scores at each decay event."""
        return math.exp(-self.decay_lambda)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SketchConfig:
        """Build a config from HISTOSKETCH_* variables, defaults elsewhere."""
        env = os.environ if environ is None else environ

        def _get(name: str, cast, default):
            raw = env.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return cast(raw)
            except ValueError as exc:
                raise ConfigError(f"{ENV_PREFIX}{name}={raw!r}: {exc}") from exc

        return cls(
            sketch_size=_get("SIZE", int, DEFAULT_SKETCH_SIZE),
            decay_interval=_get("DECAY", int, DEFAULT_DECAY_INTERVAL),
            decay_lambda=_get("LAMBDA", float, DEFAULT_DECAY_LAMBDA),
            seed=_get("SEED", int, DEFAULT_SEED),
        )

    def replace(self, **overrides) -> SketchConfig:
        """Copy with the non-None overrides applied (used by the CLI)."""
        fields = {
            "sketch_size": self.sketch_size,
            "decay_interval": self.decay_interval,
            "decay_lambda": self.decay_lambda,
            "seed": self.seed,
        }
        fields.update({k: v for k, v in overrides.items() if v is not None})
        return SketchConfig(**fields)
