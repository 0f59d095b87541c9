from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="movie-favorites",
    version="0.1.0",
    # Repo convention: backend code lives under `backend/`, split into
    # domain / application / infrastructure layers imported as top-level packages.
    package_dir={"": "backend"},
    packages=find_packages(
        where="backend",
        include=["domain", "domain.*", "application", "application.*", "infrastructure", "infrastructure.*"],
    ),
    package_data={"infrastructure.config": ["*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.6,<3",
        "pyyaml>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        # Optional: shared favorites storage in Redis.
        "redis": ["redis>=5.0.1"],
        "test": ["pytest>=7.4"],
    },
)
