#!/usr/bin/env python
# coding: UTF-8

import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

with open("README.md", "r", encoding="utf-8") as f:
    readme = f.read()

about = {}
with open(os.path.join(here, "ghorgcli", "__version__.py"), "r", encoding="utf-8") as f:
    exec(f.read(), about)

setup(
    name="ghorgcli",
    version=about["__version__"],
    description="Command Line Interface for managing a GitHub organization through the GitHub CLI",
    long_description=readme,
    long_description_content_type="text/markdown",
    url=about["__url__"],
    license="MIT",
    keywords="github organization cli",
    install_requires=[
        "jmespath",
        "more-itertools",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Utilities",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ghorgcli": ["data/logging.yaml", "data/help.yaml"]},
    entry_points={"console_scripts": ["ghorg=ghorgcli.__main__:main"]},
)
