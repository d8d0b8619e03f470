#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import re
import sys
import os
from setuptools import setup, find_packages
from pathlib import Path
this_dir = Path(__file__).absolute().parent

VERSION = re.search(r'__version__ = "(.+)"',
                    (this_dir / "specgrammar" / "version.py").read_text()).group(1)

if sys.argv[-1].startswith('publish'):
    if os.system("pip list | grep wheel"):
        print("wheel not installed.\nUse `pip install wheel`.\nExiting.")
        sys.exit()
    if os.system("pip list | grep twine"):
        print("twine not installed.\nUse `pip install twine`.\nExiting.")
        sys.exit()
    os.system("python setup.py sdist bdist_wheel")
    if sys.argv[-1] == 'publishtest':
        os.system("twine upload -r test dist/*")
    else:
        os.system("twine upload dist/*")
    sys.exit()

if __name__ == "__main__":
    setup(
        name="specgrammar",
        version=VERSION,
        description="Parser for an EBNF-like grammar notation used in "
                    "language specifications",
        packages=find_packages(include=["specgrammar", "specgrammar.*"]),
        python_requires=">=3.8",
        install_requires=["click"],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "sgrammar = specgrammar.cli:sgrammar",
            ],
        },
    )
