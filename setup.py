#!/usr/bin/env python3
"""
Setup script for usradmin, for tools that still call ``setup.py`` directly.

Metadata is read from the Poetry section of pyproject.toml so both build
paths install the same package.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]

    # Get dependencies; optional ones are only installed through extras
    install_requires = []
    extras_require: dict[str, list[str]] = {}
    optional_specs: dict[str, str] = {}
    for dep, version_spec in poetry["dependencies"].items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        else:
            optional_specs[dep] = f"{dep}{version_spec.get('version', '')}"
    for extra, deps in poetry.get("extras", {}).items():
        extras_require[extra] = [optional_specs.get(dep, dep) for dep in deps]

    scripts = poetry.get("scripts", {})

    setup(
        name=poetry["name"],
        version=poetry["version"],
        description=poetry["description"],
        author=poetry["authors"][0],
        license=poetry["license"],
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={"console_scripts": [f"{name}={target}" for name, target in scripts.items()]},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
