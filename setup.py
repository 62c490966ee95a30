# setup.py
from setuptools import setup, find_packages

setup(
    name="minischeme",
    version="0.1.0",
    description="A small Scheme interpreter with a REPL",
    packages=find_packages(include=["minischeme", "minischeme.*"]),
    python_requires=">=3.11",
    install_requires=["termcolor>=2.0"],
    extras_require={"test": ["pytest>=7", "hypothesis>=6"]},
    entry_points={"console_scripts": ["minischeme=minischeme.cli:main"]},
    zip_safe=False,
)
