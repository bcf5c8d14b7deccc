from __future__ import annotations

from dataclasses import dataclass

from queryback.errors import ConfigError


@dataclass(frozen=True)
class QuerybackConfig:
    selector: str = "link, style"
    base_font_size: float = 16.0  # px per em
    annotation_keyword: str = "Queryback Name"
    media_types: tuple[str, ...] = ("all", "screen")
    fetch_timeout: float = 10.0
    max_workers: int = 8
    user_agent: str = "queryback/0.2"

    def selector_tags(self) -> tuple[str, ...]:
        """Tag names named by the comma-separated selector, lower-cased."""
        return tuple(
            part.strip().lower() for part in self.selector.split(",") if part.strip()
        )

    def validate(self) -> None:
        """Raise :class:`ConfigError` if any value is unusable."""
        if not self.selector_tags():
            raise ConfigError("selector must name at least one element")
        if not self.annotation_keyword.strip():
            raise ConfigError("annotation_keyword must not be empty")
        if self.base_font_size <= 0:
            raise ConfigError(f"base_font_size must be positive, got {self.base_font_size}")
        if self.fetch_timeout <= 0:
            raise ConfigError(f"fetch_timeout must be positive, got {self.fetch_timeout}")
        if self.max_workers < 1:
            raise ConfigError(f"max_workers must be at least 1, got {self.max_workers}")
