[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpfilter"
version = "0.1.0"
description = "Apply colour-channel and box-blur filters to uncompressed 24-bit BMP images"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "image", "filter", "blur"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpfilter = "bmpfilter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpfilter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
