"""
Setup script for planprinter.
"""

from setuptools import find_packages
from setuptools import setup

LIBRARY = "planprinter"

# Read version and metadata
__version__ = "unknown"
with open(f"{LIBRARY}/__version__.py", "r", encoding="UTF8") as v:
    exec(v.read())

with open("README.md", "r", encoding="UTF8") as f:
    long_description = f.read()

setup(
    name=LIBRARY,
    version=__version__,
    description="Indented text rendering of query execution plans",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[LIBRARY, f"{LIBRARY}.*"]),
    python_requires=">=3.11",
    install_requires=["orjson"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
