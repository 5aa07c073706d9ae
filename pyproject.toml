[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tricount"
version = "0.1.0"
description = "Shared-expense bookkeeping: per-user balances, debts and the reimbursements that settle them"
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "split", "bills", "reimbursement", "accounting", "group"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tricount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
