[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "winterplat"
version = "0.1.0"
description = "A small OpenGL game framework with a game-loop window, fly-through camera, transforms and simple rigid-body motion"
requires-python = ">=3.10"
keywords = ["game", "opengl", "camera", "quaternion", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
winterplat = "winterplat.game:main"

[tool.hatch.build.targets.wheel]
packages = ["winterplat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
