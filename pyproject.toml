[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "contactbook"
version = "1.0.0"
description = "A small desktop contact book: keep names, e-mail addresses and phone numbers in one place."
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "phone book", "desktop", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
contactbook = "contactbook.app:main"

[tool.setuptools.packages.find]
include = ["contactbook*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
