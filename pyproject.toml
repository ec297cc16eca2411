[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packsolver"
version = "0.1.0"
description = "HTTP service that works out which pack sizes fulfil an order with the fewest surplus items"
requires-python = ">=3.10"
keywords = ["packing", "orders", "dynamic-programming", "flask", "redis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
    "redis>=4.5",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
packsolver = "packsolver.api:main"

[tool.hatch.build.targets.wheel]
packages = ["packsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
