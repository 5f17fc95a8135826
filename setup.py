#!/usr/bin/env python3

"""Setup script for the PDB structure parsing and geometry package."""

from setuptools import setup, find_packages

setup(
    name="foldview",
    version="0.1.0",
    description="PDB parsing, bond inference, ribbon geometry and backbone torsions",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.6.0",
        "biopython>=1.79",
        "tqdm>=4.62.0",
        "requests>=2.25.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "foldview-inspect=foldview.presentation.cli.inspect_structure:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
