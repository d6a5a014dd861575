[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceshooter"
version = "0.1.0"
description = "A top-down space shooter where you fight waves of kamikaze and sniper ships on tile maps."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "arcade", "pygame", "pathfinding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spaceshooter = "spaceshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
