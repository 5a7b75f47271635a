[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ns1rest"
version = "2.0.0"
description = "Endpoint services for a managed DNS REST API: zones, records, search, TSIG keys, zone versions, QPS stats, Pulsar jobs and URL redirects."
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "rest", "api", "zones", "records", "tsig", "redirects", "pulsar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ns1rest"]

[tool.hatch.build.targets.sdist]
include = ["ns1rest", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
