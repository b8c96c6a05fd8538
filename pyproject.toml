[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockcrypt"
version = "0.1.0"
description = "CRC-32 checksums and DES encryption of files in ECB and CBC modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc32", "checksum", "des", "ecb", "cbc", "block cipher", "pkcs5"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blockcrypt-crc32 = "blockcrypt.crc32:main"
blockcrypt-ecb = "blockcrypt.ecb:main"
blockcrypt-cbc = "blockcrypt.cbc:main"

[tool.hatch.build.targets.wheel]
packages = ["blockcrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
