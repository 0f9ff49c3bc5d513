"""Build configuration for httprollup."""
import os
import re

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    path = os.path.join(os.path.dirname(__file__), "src", "httprollup", "__init__.py")
    with open(path, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find __version__ in httprollup/__init__.py")
    return match.group(1)


setup(
    name="httprollup",
    version=read_version(),
    description="Translate an HTTP query string to a hierarchical structure.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.1",
        "python-dotenv>=1.0",
        "werkzeug>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["httprollup = httprollup.__main__:main"],
    },
)
