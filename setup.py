#!/usr/bin/env python

from setuptools import setup

setup(
    name="podaggregate",
    version="0.1.0",
    packages=[
        "podaggregate",
        "podaggregate.details",
        "podaggregate.details.targets",
        "podaggregate.xcode",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
)
