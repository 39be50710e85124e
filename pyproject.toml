[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pizzeria"
version = "0.1.0"
description = "A small pizzeria model: toppings, decorated pizzas, observable menus, discounts and an order workflow."
requires-python = ">=3.10"
dependencies = []
keywords = ["pizza", "point-of-sale", "orders", "menu", "discounts"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pizzeria-demo = "pizzeria.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["pizzeria"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
