"""Setup script for glive."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Return the long description, if a README is present."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="glive",
    version="0.1.0",
    description="grml-live build steps for CI jobs",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["glive", "glive.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "glive=glive.__main__:main",
        ],
    },
)
