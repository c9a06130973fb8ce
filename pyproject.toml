[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskapps"
version = "0.1.0"
description = "Small console desk applications: bank accounts, bus seats, inventories, attendance, appointments and a dice game"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "menu", "inventory", "banking", "appointments", "attendance", "reservation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskapps-banking = "deskapps.banking:main"
deskapps-bus = "deskapps.bus:main"
deskapps-casino = "deskapps.casino:main"
deskapps-inventory = "deskapps.inventory:main"
deskapps-machine = "deskapps.machine:main"
deskapps-attendance = "deskapps.attendance:main"
deskapps-appointment = "deskapps.appointment:main"
deskapps-stock = "deskapps.stock:main"

[tool.hatch.build.targets.wheel]
packages = ["deskapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
