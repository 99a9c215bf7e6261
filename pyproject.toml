[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zlspectrum"
version = "0.1.0"
description = "Spectrum analysis building blocks: synchronised multi-signal FFT analyzers, smoothed gain, mid/side splitting, Makima interpolation and equalizer parameter definitions."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "dsp", "fft", "spectrum", "analyzer", "equalizer", "akima"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zlspectrum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
