[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixeddsp"
version = "0.1.0"
description = "Q7, Q15, Q31 and float32 signal-processing primitives with saturating fixed-point arithmetic and radix-4 FFTs"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "fixed-point", "q7", "q15", "q31", "fft", "radix-4", "saturation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fixeddsp"]

[tool.hatch.build.targets.sdist]
include = ["fixeddsp", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
