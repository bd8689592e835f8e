"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, NoReturn

from oak_metrics.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields map onto ``<_prefix>_<FIELD>`` environment variables.

    Subclasses validate their fields in :meth:`_validate` and report a bad
    field with :meth:`_reject`, which names the variable to fix.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``OAK_LOG_LEVEL`` for field ``log_level`` when ``_prefix = "OAK"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _reject(self, field_name: str, reason: str) -> NoReturn:
        raise InvalidSettingValueError(
            field_name, getattr(self, field_name), reason, env_key=self.env_key(field_name)
        )


__all__ = ["Settings"]
