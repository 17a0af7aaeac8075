"""
Setup script for the league-overseer package.

The officiating engine lives in src/league_overseer; internal modules
(_config, _match, _commands, _shared) are private, the rest is the
public host-integration API.
"""

from setuptools import setup, find_packages

setup(
    name="league-overseer",
    version="1.0.0",
    description="League Overseer - match officiating and result reporting for league game servers",
    author="League Overseer Developers",
    license="Proprietary",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
        "dev": [
            "pytest>=7.4",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "league-overseer=league_overseer.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
