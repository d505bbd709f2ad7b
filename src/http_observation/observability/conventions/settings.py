"""Conventions – ObservationSettings.

12-factor settings for the observation layer.  Each field ``x`` is read from
the ``HTTP_OBSERVATION_X`` environment variable and keeps its default when the
variable is absent.
"""
from __future__ import annotations

import dataclasses
import os
from typing import ClassVar, Mapping

from http_observation.observability.conventions.keys import DEFAULT_NAME


class InvalidObservationSettingError(ValueError):
    """A setting is present but cannot name or configure an observation."""

    code = "invalid_observation_setting"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


@dataclasses.dataclass(frozen=True)
class ObservationSettings:
    """Settings for HTTP server observations."""

    env_prefix: ClassVar[str] = "HTTP_OBSERVATION"

    name: str = DEFAULT_NAME

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidObservationSettingError("name", self.name, "must not be blank")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ObservationSettings":
        """Build settings from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, str] = {}
        for field in dataclasses.fields(cls):
            raw = env.get(f"{cls.env_prefix}_{field.name}".upper())
            if raw is not None:
                kwargs[field.name] = raw
        return cls(**kwargs)


__all__ = ["InvalidObservationSettingError", "ObservationSettings"]
