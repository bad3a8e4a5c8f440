[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitteam"
version = "1.7.0"
description = "Manage co-authors for git commits: enable a team and have Co-authored-by trailers added to every commit"
requires-python = ">=3.10"
keywords = ["git", "co-author", "pair-programming", "mob-programming", "commit-template"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
git-team = "gitteam.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitteam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
