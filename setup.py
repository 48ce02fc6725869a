"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages

# To use a consistent encoding
from codecs import open
from os import path

# Read some info from the odlink package itself
import odlink

here = path.abspath(path.dirname(__file__))

# Get the long description from the relevant file
with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name=odlink.__name__,
    version=odlink.__version__,
    description=[s.replace("\n", " ") for s in odlink.__doc__.strip().split("\n\n")][0],
    long_description=long_description,
    long_description_content_type="text/markdown",
    # Author details
    author="Odlink developers",
    author_email="odlink@users.noreply.github.com",
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
    # What does your project relate to?
    keywords="orbit-determination tracking partials slr range doppler",
    # The config directory holds the default configuration, and is found relative to the odlink package
    packages=["config", "odlink"] + ["odlink." + p for p in find_packages(where="odlink")],
    package_data={"config": ["*.conf"]},
    python_requires=">=3.7",
    # List run-time dependencies here.  These will be installed by pip when your project is installed. For an analysis
    # of "install_requires" vs pip's requirements files see: https://packaging.python.org/en/latest/requirements.html
    install_requires=["midgard>=1.2.0", "numpy", "scipy", "colorama"],
    # List additional groups of dependencies here (e.g. development dependencies). You can install these using the
    # following syntax, for example:
    #   $ pip install -e .[optional,dev_tools]
    extras_require={"optional": [], "dev_tools": ["black", "bumpversion", "flake8", "mypy", "pytest"]},
)
