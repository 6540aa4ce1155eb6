#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from glob import glob
from os.path import basename
from os.path import splitext

from setuptools import find_packages
from setuptools import setup

setup(
    name="barfeed",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="battery and clock feeders for line-oriented status bars",
    long_description="Small programs that print one status line per interval to stdout: battery charge and local time.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    url="https://github.com/inklesspen/barfeed",
    packages=find_packages("src"),
    package_dir={"": "src"},
    py_modules=[splitext(basename(path))[0] for path in glob("src/*.py")],
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Desktop Environment :: Window Managers",
        "Topic :: System :: Monitoring",
    ],
    project_urls={
        "Issue Tracker": "https://github.com/inklesspen/barfeed/issues",
    },
    keywords=["statusbar", "battery", "clock"],
    python_requires=">=3.10",
    install_requires=[
        "msgspec",
        "python-dateutil>=2.8.1",
        "trio>=0.20.0",
    ],
    tests_require=["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "barfeed-battery = barfeed.scripts:battery_cli",
            "barfeed-time = barfeed.scripts:time_cli",
        ],
    },
)
