[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "tableorder"
version = "0.1.0"
description = "A small restaurant ordering system: menus of dishes, customer orders and order history."
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "menu", "ordering", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tableorder = "tableorder.restaurant:main"

[tool.setuptools.packages.find]
include = ["tableorder*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
