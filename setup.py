#!/usr/bin/env python

import os
from setuptools import find_packages, setup

version_globals = {}
with open("logcompactor/version.py") as f:
    exec(f.read(), version_globals)

version = version_globals["__version__"]
if os.getenv("LOGCOMPACTOR_VERSION_TAG"):
    version = version + "+" + os.getenv("LOGCOMPACTOR_VERSION_TAG")

setup(
    name="logcompactor",
    version=version,
    description="Replaces finished run logs with gzip-compressed versions in place",
    packages=find_packages(include=["logcompactor", "logcompactor.*"]),
    package_data={"logcompactor": ["data/*.toml"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=open("requirements.txt").read().splitlines(),
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "logcompactor = logcompactor.cli.main:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python",
        "Operating System :: OS Independent",
    ],
)
