[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small algorithms and tools: complex numbers, Euler's totient, segment intersection, surface areas, Caesar cipher, binary search, search trees, Dijkstra and arithmetic in number bases."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "complex-numbers",
    "euler-totient",
    "caesar-cipher",
    "binary-search",
    "avl-tree",
    "binary-tree",
    "dijkstra",
    "number-bases",
    "geometry",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-areas = "labkit.areas_app:main"
labkit-complex = "labkit.complex_app:main"
labkit-caesar = "labkit.cipher_app:main"
labkit-search = "labkit.search_app:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.hatch.build.targets.sdist]
include = ["labkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_redundant_casts = true
