[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iteradapt"
version = "0.1.0"
description = "Extra iterator adaptors: grouping, chunking, combinations, merging, result-aware mapping and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "iterable", "adaptors", "combinations", "groupby", "itertools"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iteradapt-iris = "iteradapt.iris:main"

[tool.hatch.build.targets.wheel]
packages = ["iteradapt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
