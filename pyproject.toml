[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodens"
version = "0.3.0"
description = "A small layered application framework with a typed event system, layer stack, host-driven window and frame loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["application", "framework", "events", "layers", "game-loop", "input"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodens"]

[tool.pytest.ini_options]
addopts = "-ra"
