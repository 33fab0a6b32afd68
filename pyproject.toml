[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tweenflow"
version = "0.7.0"
description = "Entity-based tweening: tween targets, systems that apply tweens to components, resources and assets, and timed events"
requires-python = ">=3.10"
dependencies = []
keywords = ["tween", "tweening", "animation", "ecs", "interpolation", "entity"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tweenflow"]

[tool.hatch.build.targets.sdist]
include = ["tweenflow", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
