[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmxadmission"
version = "0.1.0"
description = "Admission validation for Proxmox cluster and machine resources"
requires-python = ">=3.10"
dependencies = []
keywords = ["proxmox", "admission", "validation", "cluster-api", "ipam"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pmxadmission"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
