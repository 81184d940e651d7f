[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pypong"
version = "0.1.0"
description = "Two-player full-screen Pong with scoring, bounce sounds and a speeding ball"
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "pygame", "two-player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pypong = "pypong.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pypong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
