"""Build configuration for httpline."""
import os
import re

from setuptools import find_packages, setup


def read_version():
    path = os.path.join(os.path.dirname(__file__), "src", "httpline", "__init__.py")
    with open(path, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    if match is None:
        raise RuntimeError("Unable to find __version__ in httpline/__init__.py")
    return match.group(1)


setup(
    name="httpline",
    version=read_version(),
    description="Parser for raw HTTP/1.x request buffers.",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "click>=8.0",
        "werkzeug>=2.3",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["httpline = httpline.cli:main"],
    },
)
