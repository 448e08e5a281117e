[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remotia"
version = "0.1.4"
description = "Asynchronous frame-processing pipelines for media streaming and remote rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "streaming", "remote rendering", "pipeline", "asyncio", "frames"]
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
    "Framework :: AsyncIO",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["remotia"]

[tool.hatch.build.targets.sdist]
include = ["remotia", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
