[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "instadraw"
version = "0.1.0"
description = "Building blocks for instanced 2D OpenGL rendering: instance buffer, frame clock, shaders, textures and events"
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "instancing", "2d", "shaders", "textures"]
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pyglet",
    "numpy",
    "pillow",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["instadraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
