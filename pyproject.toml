[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chimielab"
version = "0.1.0"
description = "Seventh-grade chemistry practice: solved concentration problems, a periodic table, atom, molecule and mixture games, and learning statistics"
requires-python = ">=3.10"
dependencies = [
    "pymysql",
]
keywords = [
    "chemistry",
    "education",
    "periodic-table",
    "concentration",
    "molecules",
    "quiz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chimielab = "chimielab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chimielab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
