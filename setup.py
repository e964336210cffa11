"""Setup of the RinexData package

Install with::

    pip install -e .
    pip install -e .[dev_tools]     # Including tools used for development and testing
"""

from setuptools import setup, find_packages
from codecs import open
from os import path

# Version and description are read from the rinexdata package itself
import rinexdata

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name=rinexdata.__name__,
    version=rinexdata.__version__,
    description=rinexdata.__doc__.strip().split("\n")[0],
    long_description=long_description,
    long_description_content_type="text/markdown",
    author=rinexdata.__author__,
    author_email=rinexdata.__contact__,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: GIS",
    ],
    keywords="rinex gnss gps glonass galileo beidou observation navigation",
    # The tests directories are not packages, so they are not installed
    packages=["rinexdata"] + ["rinexdata." + p for p in find_packages(where="rinexdata")],
    python_requires=">=3.6",
    install_requires=["midgard>=1.2.0", "numpy", "colorama"],
    extras_require={"dev_tools": ["black", "bumpversion", "flake8", "mypy", "pytest"]},
    package_data={"rinexdata": ["config/*.conf"]},
)
