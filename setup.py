#!/usr/bin/env python3
# setup.py: installs the build tooling package
#
# Install:
#   pip install -e .
#   pip install -e .[test]   # with test dependencies
#
# Run:
#   python main.py

from setuptools import setup, find_packages

# Use README.md as the long description when present
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Build tooling: console output, licence embedding and unit helpers"

setup(
    name="engine-build-tools",
    version="1.0.0",
    description="Build tooling for the engine project",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",  # ANSI codes + Windows console support
        "rich>=13.0",  # live spinner for progress sessions
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Build Tools",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
