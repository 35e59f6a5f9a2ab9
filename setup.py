# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Setup configuration for openfeature-config-store package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="openfeature-config-store",
    version="0.1.0",
    author="Copilot-for-Consensus Contributors",
    description="Configuration store adapter serving OpenFeature flag evaluations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "openfeature-sdk>=0.7.0",  # Evaluation context, resolution details and error codes
    ],
    extras_require={
        "flagd": [
            "openfeature-provider-flagd>=0.1.5",
        ],
        "gofeatureflag": [
            "gofeatureflag-python-provider>=0.2.0",
            "urllib3>=1.26.0",  # HTTP pool with the relay timeout
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
)
