#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Flow Document Generator - Setup Configuration
Optional dependency groups for development.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_path.exists():
    requirements = [
        line.strip()
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="flowdoc",
    version="1.0.0",
    description="Render automated business-process flows as printable DOCX/PDF documents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Flowdoc Team",
    python_requires=">=3.10",
    packages=find_packages(include=["flowdoc", "flowdoc.*", "config"]),
    package_data={
        "flowdoc.i18n": ["locales/*.json"],
    },
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        # Development dependencies
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "flowdoc=flowdoc.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Text Processing :: Markup",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="process flow documentation docx pdf i18n",
)
