#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pathlib
from typing import List

from setuptools import setup, find_packages


LOCATION = pathlib.Path(__file__).parent.resolve()


# Get the long description from the README file
readme_file = LOCATION / "README.md"

readme_lines = [line.strip() for line in readme_file.open(encoding="utf-8").readlines()]
description = [line for line in readme_lines if line and not line.startswith("#")][0]
long_description = "\n".join(readme_lines)


def merge_req_lists(*req_lists: List[str]) -> List[str]:
    result: set[str] = set()
    for req_list in req_lists:
        for req in req_list:
            result.add(req)
    return list(result)


core = [
    "pydantic>=2.0.3,<3.0",
    "typing-extensions",
]

yaml_dependencies = [
    "pyyaml",
]

full = merge_req_lists(
    core,
    yaml_dependencies,
)

test_requirements = merge_req_lists(
    [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "flake8>=6.1.0",
        "black>=23.9.1",
        "isort>=5.12.0",
    ],
    yaml_dependencies,
)

devel = [
    "bump2version==1.0.1",
    "build==1.0.0",
    "twine==4.0.0",
]

mypy_dependencies = [
    "mypy==1.6.0",
]

devel_full = merge_req_lists(
    test_requirements,
    devel,
    mypy_dependencies,
)


EXTRA_DEPENDENCIES = {
    "core": core,  # minimal dependencies (by default)
    "yaml": yaml_dependencies,  # dependencies for importing graphs from YAML files
    "full": full,  # full dependencies including all options above
    "tests": test_requirements,  # dependencies for running tests
    "devel": devel,  # dependencies for development
    "devel_full": devel_full,  # full dependencies for development (all options above)
}

setup(
    name="graphbot",
    version="0.1.0",
    description=description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
    ],
    keywords="chatbots",
    packages=find_packages(where=".", include=["graphbot", "graphbot.*"]),
    include_package_data=True,
    python_requires=">=3.9, <4",
    install_requires=core,
    test_suite="tests",
    extras_require=EXTRA_DEPENDENCIES,
)
