# === FILE: icon_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации IconScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# В порядке приоритета: HTTPS-прокси важнее HTTP-прокси.
_PROXY_ENV = {
    "https": ("HTTPS_PROXY", "https_proxy"),
    "http": ("HTTP_PROXY", "http_proxy"),
}


def _env_value(names: tuple[str, ...]) -> Optional[str]:
    """Первое непустое значение из переменных окружения names."""
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


class ScoutConfig(BaseModel):
    """Неизменяемая конфигурация клиента и поиска иконок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(10.0, gt=0, description="Таймаут на одну попытку запроса (секунд).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    retry_times: int = Field(2, ge=0, description="Число повторных попыток загрузки иконки.")
    retry_delay: float = Field(1.0, ge=0, description="Фиксированная пауза между попытками (секунд).")
    page_retry_times: int = Field(0, ge=0, description="Число повторных попыток загрузки страницы.")
    fallback_paths: list[str] = Field(
        default_factory=lambda: ["/favicon.ico"],
        min_length=1,
        description="Стандартные пути, проверяемые после ссылок из разметки.",
    )
    output_sizes: list[int] = Field(
        default_factory=lambda: [16, 32, 64, 128, 256],
        min_length=1,
        description="Размеры итоговых PNG (пикселей).",
    )
    https_proxy: Optional[str] = Field(default_factory=lambda: _env_value(_PROXY_ENV["https"]))
    http_proxy: Optional[str] = Field(default_factory=lambda: _env_value(_PROXY_ENV["http"]))
    host: str = Field("127.0.0.1", description="Адрес HTTP API.")
    port: int = Field(3000, ge=1, le=65535, description="Порт HTTP API.")

    @field_validator("output_sizes")
    def _check_sizes(cls, v: list[int]) -> list[int]:
        if any(size <= 0 for size in v):
            raise ValueError("output_sizes must contain positive integers")
        return v

    @field_validator("fallback_paths")
    def _check_paths(cls, v: list[str]) -> list[str]:
        cleaned = [p.strip() for p in v]
        if any(not p for p in cleaned):
            raise ValueError("fallback_paths must not contain empty entries")
        return cleaned

    @property
    def proxy(self) -> Optional[str]:
        """Прокси для исходящих запросов: HTTPS предпочтительнее HTTP."""
        return self.https_proxy or self.http_proxy


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScoutConfig.
    Без пути берёт configs/default.yaml, а если его нет, значения по умолчанию.
    Явно указанный, но отсутствующий файл приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScoutConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return ScoutConfig(**data)
    except ValidationError:
        raise


__all__ = ["ScoutConfig", "load_config", "DEFAULT_USER_AGENT"]
