from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.items import Category, SortOrder

DEFAULT_ENDPOINT_URL = "https://api.axelriveroc.com/webhook/n8nlibrary/get"

_ENV_KEYS: Dict[str, str] = {
    "endpoint_url": "INFRALIB_ENDPOINT_URL",
    "files_base_url": "INFRALIB_FILES_BASE_URL",
    "request_timeout_s": "INFRALIB_REQUEST_TIMEOUT_S",
    "download_timeout_s": "INFRALIB_DOWNLOAD_TIMEOUT_S",
    "default_category": "INFRALIB_DEFAULT_CATEGORY",
    "default_sort": "INFRALIB_DEFAULT_SORT",
    "save_dir": "INFRALIB_SAVE_DIR",
    "debug_logging": "INFRALIB_DEBUG",
}


@dataclass
class SettingsConfig:
    """Typed runtime settings for the catalog browser."""

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    files_base_url: str = ""
    request_timeout_s: int = 10
    download_timeout_s: int = 60
    default_category: str = Category.TEMPLATE.value
    default_sort: str = SortOrder.DESC.value
    save_dir: str = ""
    debug_logging: bool = False


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from ``INFRALIB_*`` environment variables."""
        env = os.environ if environ is None else environ
        vm = cls()
        payload = {key: env[var] for key, var in _ENV_KEYS.items() if env.get(var)}
        if payload:
            vm.apply_dict(payload)
        return vm

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def endpoint_url(self) -> str:
        return self.config.endpoint_url

    @endpoint_url.setter
    def endpoint_url(self, value: str) -> None:
        text = str(value or "").strip()
        if not text:
            raise ValueError("endpoint_url must not be empty.")
        self.config = replace(self.config, endpoint_url=text)

    @property
    def files_base_url(self) -> str:
        return self.config.files_base_url

    @files_base_url.setter
    def files_base_url(self, value: str) -> None:
        self.config = replace(self.config, files_base_url=str(value or "").strip())

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: int) -> None:
        self.config = replace(self.config, request_timeout_s=self._coerce_int("request_timeout_s", value, minimum=1))

    @property
    def download_timeout_s(self) -> int:
        return self.config.download_timeout_s

    @download_timeout_s.setter
    def download_timeout_s(self, value: int) -> None:
        coerced = self._coerce_int("download_timeout_s", value, minimum=1)
        self.config = replace(self.config, download_timeout_s=coerced)

    @property
    def save_dir(self) -> str:
        return self.config.save_dir

    @save_dir.setter
    def save_dir(self, value: Any) -> None:
        self.config = replace(self.config, save_dir=str(value or "").strip())

    @property
    def default_category(self) -> Category:
        return Category.parse(self.config.default_category)

    @default_category.setter
    def default_category(self, value: Any) -> None:
        self.config = replace(self.config, default_category=Category.parse(value).value)

    @property
    def default_sort(self) -> SortOrder:
        return SortOrder.parse(self.config.default_sort)

    @default_sort.setter
    def default_sort(self, value: Any) -> None:
        self.config = replace(self.config, default_sort=SortOrder.parse(value).value)

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: Any) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = set(SettingsConfig.__annotations__.keys())
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        for key in SettingsConfig.__annotations__:
            if key in payload:
                setattr(self, key, payload[key])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self.config)

    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_int(name: str, value: Any, *, minimum: int) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer.") from None
        if number < minimum:
            raise ValueError(f"{name} must be >= {minimum}.")
        return number

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
