"""Local settings store for the access token and its expiry."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# Tokens expiring within this window are treated as already expired.
TOKEN_EXPIRY_MARGIN_MS = 60_000


class StoredSettings(BaseModel):
    """On-disk schema. Keys are stored under their camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    access_token: str = Field(default="", alias="accessToken")
    token_expiry: int = Field(default=0, alias="tokenExpiry")


# alias -> field name
_KEYS = {field.alias: name for name, field in StoredSettings.model_fields.items()}


class SettingsStore:
    """A small JSON-file-backed key/value store.

    Keys are ``accessToken`` (str) and ``tokenExpiry`` (epoch milliseconds).
    Reading an unset key returns its default; the file is only written by
    ``set`` and removed by ``clear``.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._settings = self._load()

    def _load(self) -> StoredSettings:
        if not self.path.exists():
            return StoredSettings()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return StoredSettings()
        if not isinstance(raw, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self.path)
            return StoredSettings()

        # each key is validated on its own; an invalid one keeps its default
        values = {}
        for key in _KEYS:
            if key not in raw:
                continue
            try:
                StoredSettings.model_validate({key: raw[key]})
            except ValidationError:
                logger.warning("Ignoring invalid %s in settings file %s", key, self.path)
                continue
            values[key] = raw[key]
        return StoredSettings.model_validate(values)

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self._settings.model_dump(by_alias=True), indent=2),
            encoding="utf-8",
        )

    def get(self, key: str) -> Any:
        """Get a value by its stored key, or the key's default."""
        if key not in _KEYS:
            raise KeyError(key)
        return getattr(self._settings, _KEYS[key])

    def set(self, key: str, value: Any) -> None:
        """Coerce and persist a value.

        Raises:
            KeyError: unknown key
            ValueError: value cannot be coerced to the key's type
        """
        if key not in _KEYS:
            raise KeyError(key)
        data = self._settings.model_dump(by_alias=True)
        data[key] = value
        try:
            self._settings = StoredSettings.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {value!r}") from e
        self._save()

    def get_all(self) -> dict[str, Any]:
        return self._settings.model_dump(by_alias=True)

    def clear(self) -> None:
        """Remove every stored value."""
        self._settings = StoredSettings()
        if self.path.exists():
            self.path.unlink()

    def is_configured(self) -> bool:
        return bool(self._settings.access_token)

    def has_valid_token(self, now_ms: Optional[int] = None) -> bool:
        """True if a token is stored and expires more than 60s from now."""
        if not self._settings.access_token:
            return False
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        return self._settings.token_expiry > now_ms + TOKEN_EXPIRY_MARGIN_MS
