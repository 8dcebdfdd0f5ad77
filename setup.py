from __future__ import annotations

import os

from setuptools import find_packages, setup

dependencies = [
    "chia_rs>=0.10.0",  # sized bytes and ints shared with the chia node
    "click==8.1.3",  # For the CLI
    "colorlog==6.8.2",  # Adds color to logs
    "concurrent-log-handler==0.9.25",  # Concurrently log and rotate logs
    "importlib_resources==6.1.1",  # Reads the packaged initial config
    "PyYAML==6.0.1",  # Used for config file format
]

dev_dependencies = [
    "build==1.0.3",
    "coverage==7.4.1",
    "pytest==8.0.2",
    "pytest-cov==4.1.0",
    "pytest-mock==3.12.0",
    "isort==5.13.2",
    "flake8==7.0.0",
    "mypy==1.8.0",
    "black==23.12.1",
    "types-pyyaml==6.0.12.12",
    "types-setuptools==69.1.0.20240217",
]

kwargs = dict(
    name="settlement-trace",
    description="Finds the coins asserted by settlement payments through coin and puzzle announcements.",
    license="Apache License",
    python_requires=">=3.9, <4",
    keywords="chia blockchain announcements settlement",
    install_requires=dependencies,
    extras_require=dict(
        dev=dev_dependencies,
    ),
    packages=find_packages(include=["settlement_trace", "settlement_trace.*"]),
    entry_points={
        "console_scripts": [
            "settlement_trace = settlement_trace.cmds.settlement_trace:main",
        ]
    },
    package_data={
        "": ["py.typed"],
        "settlement_trace.util": ["initial-*.yaml"],
    },
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    zip_safe=False,
)

if len(os.environ.get("SETTLEMENT_TRACE_SKIP_SETUP", "")) < 1:
    setup(**kwargs)  # type: ignore
