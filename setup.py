"""Setup configuration for filesort."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="filesort",
    version="0.1.0",
    description="Sorts files into category directories by file extension",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyYAML==6.0.3",
    ],
    extras_require={
        "dev": [
            "pytest==8.3.5",
            "pytest-cov==6.0.0",
            "black==24.10.0",
            "ruff==0.8.4",
            "mypy==1.13.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "filesort=filesort.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: System :: Filesystems",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
