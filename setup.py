#!/usr/bin/env python3
"""
Setup script for the Infoblox network container provider.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

packages = find_packages(where=".", include=["infoblox_provider", "infoblox_provider.*"])

setup(
    name="infoblox-container-provider",
    version="1.0.0",
    author="Infoblox Container Provider Project",
    description="Infrastructure-as-code provider logic for Infoblox IPAM network containers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=packages,
    package_dir={"": "."},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "infoblox-nc=infoblox_provider.cli.cli:main",
        ],
        "oslo.config.opts": [
            "infoblox_provider = infoblox_provider.provider.configuration:list_opts",
        ],
    },
)
