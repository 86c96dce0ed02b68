from setuptools import find_packages, setup

setup(
    name="passlink",
    version="0.1.0",
    description="Turn Bible references into ref.ly, Logos and Biblia.com passage links",
    packages=find_packages(include=["passlink", "passlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ vendors its own click)
        "click>=8.2",  # Typer context and usage errors
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # URL and link templates
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "passlink=passlink.cli:main",
        ],
    },
)
