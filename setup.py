# setup.py
from setuptools import setup, find_packages

setup(
    name="skate-lisp",
    version="0.1.0",
    description="A tiny Lisp interpreter over floats and quoted literals",
    packages=find_packages(include=["skate", "skate.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["skate=skate.cli:main"],
    },
    zip_safe=False,
)
