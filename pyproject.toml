[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docindex"
version = "0.1.0"
description = "Inverted word index over documents, with ranked search that skips stop words"
requires-python = ">=3.10"
dependencies = []
keywords = ["inverted index", "search", "hash table", "binary search tree", "stop words"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docindex-build = "docindex.indexer:main"
docindex-search = "docindex.search:main"

[tool.hatch.build.targets.wheel]
packages = ["docindex"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
