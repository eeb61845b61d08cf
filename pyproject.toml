[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmcrypt"
version = "0.1.0"
description = "SM3 hashing and Schnorr, multi and ring signatures on the SM2 curve, with mnemonics and secret sharing"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["sm2", "sm3", "schnorr", "multisignature", "ring-signature", "mnemonic", "shamir"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gmcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
