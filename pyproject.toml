[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raysketch"
version = "0.1.0"
description = "A small sphere ray tracer with PPM image output and an interactive viewer"
requires-python = ">=3.10"
keywords = ["ray tracing", "rendering", "ppm", "spheres", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raysketch = "raysketch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["raysketch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
