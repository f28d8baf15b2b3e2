[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cynan"
version = "0.8.5"
description = "Building blocks for an IMS core: post-quantum mode settings and message layouts, IPsec bookkeeping, module registry and SIP metrics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ims",
    "sip",
    "volte",
    "ipsec",
    "post-quantum",
    "ml-dsa",
    "ml-kem",
    "prometheus",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["cynan"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
