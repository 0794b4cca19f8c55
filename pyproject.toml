[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexui"
version = "0.1.0"
description = "A retained-mode widget toolkit for game menus: containers, buttons, sliders, list boxes, input boxes, dialogs and animated dialog controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "widgets", "menu", "game", "toolkit", "dialog"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nexui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
