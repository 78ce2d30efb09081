#!/usr/bin/env python3

import os

from setuptools import find_packages, setup


def get_version() -> str | None:
    # https://packaging.python.org/guides/single-sourcing-package-version/
    with open(os.path.join("sortsearch", "__init__.py")) as f:
        for line in f:
            if line.startswith("__version__"):
                return line.strip().split()[-1][1:-1]
        return None


def get_readme() -> str:
    with open("README.md") as f:
        return f.read()


def get_install_requires() -> list[str]:
    return [
        "numpy>=2.0",  # comparisons with python scalars follow NEP 50
        "numba>=0.60.0",
        "sensai-utils>=1.2.1",
        "jsonargparse[signatures]>=4.24.1",  # signatures extra provides docstring-parser
    ]


def get_extras_require() -> dict[str, list[str]]:
    req = {
        "dev": [
            "black>=23.7.0",
            "ruff>=0.0.285",
            "pytest",
            "pytest-cov",
            "mypy",
        ],
        "test": ["pytest", "pytest-cov"],
    }
    return req


setup(
    name="sortsearch",
    version=get_version(),
    description="Binary search over sorted sequences, with compiled kernels for numpy arrays",
    long_description=get_readme(),
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.11",
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="binary search bisection lower bound numba",
    packages=find_packages(exclude=["test", "test.*", "docs", "docs.*"]),
    install_requires=get_install_requires(),
    extras_require=get_extras_require(),
)
