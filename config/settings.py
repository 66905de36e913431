#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

from .constants import DEFAULT_FONT, DEFAULT_LOCALE


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Localization ==========
    locale: str = DEFAULT_LOCALE  # en | ja
    locales_dir: Optional[Path] = None  # Override bundled catalogs

    # ========== Document ==========
    default_font: str = DEFAULT_FONT
    page_size: str = "A4"  # A4 | A5 | letter
    output_format: str = "docx"  # docx | pdf | json

    # PDF only: TTF registered with reportlab under default_font.
    # Without it the PDF adapter falls back to Helvetica.
    pdf_font_path: Optional[Path] = None
    pdf_bold_font_path: Optional[Path] = None

    # ========== Directories ==========
    output_dir: Path = BASE_DIR / "data" / "output"
    logs_dir: Path = BASE_DIR / "data" / "logs"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def ensure_directories(self) -> None:
        """Create output and log directories."""
        for dir_path in [self.output_dir, self.logs_dir]:
            dir_path.mkdir(exist_ok=True, parents=True)


# Global settings instance
settings = Settings()
