"""
Service configuration read from environment variables.

License: MIT
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional


def parse_font_files(value: Optional[str]) -> Dict[str, str]:
    """Parse 'Family=/path/font.ttf,Other=/path/other.ttf' into a mapping."""
    font_files: Dict[str, str] = {}
    if not value:
        return font_files
    for entry in value.split(","):
        if "=" not in entry:
            continue
        family, path = entry.split("=", 1)
        if family.strip() and path.strip():
            font_files[family.strip()] = path.strip()
    return font_files


@dataclass
class Settings:
    """Runtime settings."""
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-3.5-turbo"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-pro"
    generation_timeout: float = 60.0
    log_level: str = "INFO"
    font_files: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            openai_model=env.get("OPENAI_MODEL", "gpt-3.5-turbo"),
            gemini_api_key=env.get("GEMINI_API_KEY") or None,
            gemini_model=env.get("GEMINI_MODEL", "gemini-pro"),
            generation_timeout=float(env.get("GENERATION_TIMEOUT", "60")),
            log_level=env.get("ASSIGNMENT_PDF_LOG_LEVEL", "INFO").upper(),
            font_files=parse_font_files(env.get("ASSIGNMENT_PDF_FONTS")),
        )
