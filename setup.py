#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from setuptools import setup
from pathlib import Path
this_dir = Path(__file__).absolute().parent

version = {}
exec((this_dir / "infixeval" / "version.py").read_text(), version)

if __name__ == "__main__":
    setup(
        name="infixeval",
        version=version["__version__"],
        description="Single pass recursive descent evaluator for "
                    "arithmetic expressions",
        packages=["infixeval"],
        python_requires=">=3.8",
        install_requires=["click"],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "infixeval = infixeval.cli:infixeval",
            ],
        },
    )
