"""Package setup for gs308ep."""

from setuptools import setup, find_packages

setup(
    name="gs308ep",
    version="0.5.0",
    description="Control client for the Netgear GS308EP PoE switch web interface",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gs308ep=gs308ep.cli:main",
        ],
    },
)
