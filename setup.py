from setuptools import find_packages, setup

setup(
    name="ccr",
    version="1.0.0",
    description="Claude Code Router - supervise the local router service and forward code sessions to it",
    packages=find_packages(include=["ccr", "ccr.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework; 0.26+ vendors click, breaking click.get_current_context()
        "click",  # Typer's parser; contexts and exceptions used directly
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "PyYAML",  # YAML structured output
        "pygments",  # Output highlighting on a TTY
        "aiohttp",  # Background service and upstream calls
        "requests",  # CLI -> service HTTP calls
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "ccr=ccr.cli:main",
        ],
    },
)
