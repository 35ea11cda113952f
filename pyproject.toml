[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tifinagh"
version = "0.1.0"
description = "Transliterate Latin-script Amazigh (Berber) text into Tifinagh."
requires-python = ">=3.10"
dependencies = []
keywords = ["tifinagh", "amazigh", "berber", "transliteration", "unicode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tifinagh = "tifinagh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tifinagh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
