[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audiokit"
version = "0.1.0"
description = "PCM sample formats, sample-rate conversion and spectrum bar helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "resampling", "pcm", "spectrum", "fft"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["audiokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
