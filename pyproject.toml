[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastbox"
version = "1.0.0"
description = "A small interactive command shell with a line-based text editor and an SSH launcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "console", "editor", "ssh", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fastbox = "fastbox.shell:main"
fastbox-edit = "fastbox.editor:main"
fastbox-ssh = "fastbox.ssh:main"

[tool.hatch.build.targets.wheel]
packages = ["fastbox"]

[tool.pytest.ini_options]
addopts = "-ra"
