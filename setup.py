#!/usr/bin/env python
"""Setup configuration for Script Renderer."""

from setuptools import find_packages, setup

setup(
    name="script-renderer",
    version="0.1.0",
    description=(
        "Script segmentation and per-script typography for mixed Khmer, Thai, "
        "Lao, Myanmar, Vietnamese and Latin text"
    ),
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "click>=8.1.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "script-renderer=script_renderer.cli:main",
        ],
    },
)
