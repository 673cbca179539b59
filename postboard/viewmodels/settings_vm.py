from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_requests_debug

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class SettingsConfig:
    """Typed runtime settings, loaded from ``user_settings.json`` by StorageLocal."""

    base_url: str = DEFAULT_BASE_URL
    request_timeout_s: int = 10
    retries: int = 0
    offline: bool = False
    debug_logging: bool = False


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
    ) -> None:
        self.config = config or SettingsConfig(debug_logging=env_requests_debug())

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def base_url(self) -> str:
        return self.config.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.config = replace(self.config, base_url=self._coerce_url(value))

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: int) -> None:
        self.config = replace(
            self.config,
            request_timeout_s=self._coerce_int("request_timeout_s", value, minimum=1),
        )

    @property
    def retries(self) -> int:
        return self.config.retries

    @retries.setter
    def retries(self, value: int) -> None:
        self.config = replace(self.config, retries=self._coerce_int("retries", value, minimum=0))

    @property
    def offline(self) -> bool:
        return self.config.offline

    @offline.setter
    def offline(self, value: bool) -> None:
        self.config = replace(self.config, offline=self._coerce_bool(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = set(SettingsConfig.__annotations__.keys())
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "base_url":
            return self._coerce_url(raw)
        if key == "request_timeout_s":
            return self._coerce_int(key, raw, minimum=1)
        if key == "retries":
            return self._coerce_int(key, raw, minimum=0)
        if key in {"offline", "debug_logging"}:
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_url(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("base_url must be a non-empty string.")
        text = value.strip().rstrip("/")
        if not (text.startswith("http://") or text.startswith("https://")):
            raise ValueError("base_url must start with http:// or https://.")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, minimum: Optional[int] = None) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if minimum is not None and coerced < minimum:
            raise ValueError(f"{name} must be >= {minimum}.")
        return coerced
