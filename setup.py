from setuptools import find_packages, setup

setup(
    name="ths",
    version="0.1.0",
    description="Thanos sidecar service manager - renders and applies systemd/launchd units",
    packages=find_packages(include=["ths", "ths.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schema validation
        "typer<0.26",  # CLI; 0.26+ vendors its own click, breaking the direct click imports
        "click",  # Typer context and usage errors imported directly
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "jinja2",  # Unit file rendering
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "thsc=ths.cli:main",
        ],
    },
)
