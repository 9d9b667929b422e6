#!/usr/bin/env python
"""Setup configuration for the Ethiopian Date Service."""

from setuptools import find_namespace_packages, setup

setup(
    name="ethiopian-date-service",
    version="0.1.0",
    description="HTTP service converting Gregorian dates to the Ethiopian calendar",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["app"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ethiopian-date-service=app:main",
        ],
    },
)
