[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examkit"
version = "0.1.0"
description = "Small command-line tools: chunked line reading, word masking, scanf-style input, subset sums, permutations, parenthesis repair and N-queens."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "line-reader",
    "filter",
    "scanf",
    "subset-sum",
    "permutations",
    "parentheses",
    "n-queens",
    "backtracking",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
examkit-gnl = "examkit.gnl:main"
examkit-filter = "examkit.filter:main"
examkit-scanf = "examkit.scanf:main"
examkit-powerset = "examkit.powerset:main"
examkit-permutations = "examkit.permutations:main"
examkit-rip = "examkit.rip:main"
examkit-n-queens = "examkit.n_queens:main"

[tool.hatch.build.targets.wheel]
packages = ["examkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
