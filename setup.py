#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="degree_minute_fmt",
    version="0.1.0",
    description="Degree/minute formatting of decimal degrees for plot axes, tables and NetCDF grids",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
        "xarray",
        "netcdf4",
        "matplotlib",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    scripts=["scripts/format_degrees.py"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: GIS",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Operating System :: OS Independent",
    ],
    keywords="degrees minutes latitude longitude formatting matplotlib axis labels",
)
