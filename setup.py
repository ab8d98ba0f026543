"""Package setup for uniqfile."""

from setuptools import setup, find_packages

setup(
    name="uniqfile",
    version="1.0.0",
    description="Content-addressed, idempotent file writes (SHA-256 file names)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "colorlog>=6.8.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "uniqfile=uniqfile.cli:main",
        ],
    },
)
