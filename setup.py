#!/usr/bin/env python

# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="c64keyboard",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Map host keyboard input onto the C64 keyboard matrix",
    long_description="Key identities, matrix coordinates and character translation for the Commodore 64 keyboard.",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: System :: Emulators",
    ],
    keywords=["c64", "emulator", "keyboard"],
    python_requires=">=3.10",
    install_requires=[
        "attrs>=22.2.0",
        "cattrs>=22.2.0",
        "msgspec",
    ],
    tests_require=["pytest>=6.2.4"],
    extras_require={
        "test": ["pytest>=6.2.4"],
    },
    entry_points={
        "console_scripts": [
            "c64keyboard-translate=c64keyboard.scripts:translate_cli",
            "c64keyboard-matrix=c64keyboard.scripts:print_matrix",
            "c64keyboard-write-settings=c64keyboard.scripts:write_settings_cli",
        ],
    },
)
