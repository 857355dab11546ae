[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small command-line programs: Game of Life, hangman, a chat bot, file hashing, a TCP file server and client, a findings database, TLS and HTTP fetchers, small web servers, system details and MongoDB loaders."
requires-python = ">=3.10"
keywords = ["game-of-life", "hangman", "chat-bot", "cli", "sqlite", "mongodb", "http", "tls"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-mock",
]

[project.scripts]
labkit-life = "labkit.life:main"
labkit-dvd = "labkit.dvd:main"
labkit-hangman = "labkit.hangman:main"
labkit-recurse = "labkit.recurse:main"
labkit-movie-sort = "labkit.movies:main_sort"
labkit-movie-tree = "labkit.movies:main_tree"
labkit-temperatures = "labkit.temperatures:main"
labkit-chat = "labkit.chat:main"
labkit-filehash = "labkit.filehash:main"
labkit-fileserver = "labkit.fileserver:main"
labkit-fileclient = "labkit.fileclient:main"
labkit-findings = "labkit.findings:main"
labkit-tlsfetch = "labkit.tlsfetch:main"
labkit-http = "labkit.httpclient:main"
labkit-webapp = "labkit.webapp:main"
labkit-sysdetails = "labkit.sysdetails:main"
labkit-people-load = "labkit.people:main_load"
labkit-people-lookup = "labkit.people:main_lookup"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
