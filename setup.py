"""
Build script for molweight.

Install with `pip install -e .`; add `[test]` for the test suite, or
`[pandas]` / `[molmass]` for the optional DataFrame export and
molmass-backed periodic table.
"""
from setuptools import setup, find_packages

setup(
    name="molweight",
    version="0.1.0",
    description=(
        "Chemical formula parser and molar mass calculator with nested "
        "groups and hydration notation"
    ),
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*", "benchmarks"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "pandas": ["pandas"],
        "molmass": ["molmass"],
        "test": ["pytest"],
    },
)
