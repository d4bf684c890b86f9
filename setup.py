from setuptools import find_packages, setup

setup(
    name="cleanpath",
    version="0.1.0",
    description="Lexical path cleanup with tilde, environment and base-directory transforms",
    packages=find_packages(include=["cleanpath", "cleanpath.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",  # Command line interface
        "click>=8.0",  # Usage errors raised through Typer
        "pydantic>=2.0",  # Option and configuration models
        "rich",  # Terminal formatting of the verbose trace
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "cleanpath=cleanpath.cli:main",
        ],
    },
)
