from typing import Literal

from pydantic import BaseModel, field_validator

SiteLanguage = Literal['fr', 'en', 'es']


class BlogSettingsOut(BaseModel):
    name: str
    description: str
    theme_color: str
    language: SiteLanguage
    use_subdomains: bool


class BlogSettingsUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    theme_color: str | None = None
    language: SiteLanguage | None = None
    use_subdomains: bool | None = None

    @field_validator('theme_color')
    @classmethod
    def validate_theme_color(cls, value: str | None) -> str | None:
        if value is None:
            return value
        normalized = value.strip().lower()
        if len(normalized) not in {4, 7} or not normalized.startswith('#'):
            raise ValueError('theme_color must be a #rgb or #rrggbb hex color')
        if any(ch not in '0123456789abcdef' for ch in normalized[1:]):
            raise ValueError('theme_color must be a #rgb or #rrggbb hex color')
        return normalized
