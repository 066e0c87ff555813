[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscamp"
version = "0.1.0"
description = "Operating-system and concurrency exercises: threads, locks, allocators, async tasks and page-table simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating systems", "concurrency", "page table", "tlb", "allocator", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["oscamp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
