from setuptools import find_packages, setup

setup(
    name="units",
    version="0.1.0",
    description="units - deploy directory trees of systemd unit files and manage their services",
    packages=find_packages(include=["units", "units.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",  # Config validation and output schemas
        "typer>=0.9,<0.26",  # CLI
        "click>=8.0",  # Typer runtime, prompts and exceptions
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "units=units.cli:main",
        ],
    },
)
