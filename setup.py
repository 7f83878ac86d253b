#!/usr/bin/env python3
# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0

"""Setup script for nvme-pel."""

from setuptools import setup, find_packages

setup(
    name="nvme-pel",
    version="0.1.0",
    description="Decode NVMe Persistent Event Log (log page 0x0d) captures",
    author="Aria Akhavan",
    license="Apache-2.0",
    packages=find_packages(include=["nvme_pel", "nvme_pel.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
