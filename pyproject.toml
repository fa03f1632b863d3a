[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "animstudio"
version = "0.1.0"
description = "Vectors, an entity-component registry, frame pacing, mouse grabs, a text editing engine and binary project and state files"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "text-editing", "undo", "serialization", "binary-format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["animstudio"]

[tool.pytest.ini_options]
addopts = "-ra"
