[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crawlkit"
version = "0.2.0"
description = "A polite, multi-threaded web crawler with BFS/DFS/mixed frontier strategies, robots.txt support and optional MongoDB storage"
requires-python = ">=3.10"
keywords = ["crawler", "spider", "robots.txt", "web", "mongodb", "scraping"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "pymongo>=4.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
crawlkit = "crawlkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crawlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
