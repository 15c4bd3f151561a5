[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unknownengine"
version = "0.1.0"
description = "Core of a small game engine: an entity-component-system, transforms, lighting data, a camera and component serialization"
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "game-engine", "transform", "serialization"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["unknownengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
