[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sentinelguard"
version = "0.1.0"
description = "Domain models and environment configuration for an access-control service built around projects, service accounts, environments and scopes."
requires-python = ">=3.11"
dependencies = [
    "python-dotenv",
]
keywords = [
    "access-control",
    "authorization",
    "service-accounts",
    "scopes",
    "environments",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sentinelguard"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
