[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gcpextension"
version = "0.1.0"
description = "GCP provider logic for Kubernetes shoot clusters: service accounts, label sanitising, DNS record sets, firewall and route cleanup, and Terraform values and status."
requires-python = ">=3.10"
dependencies = []
keywords = ["gcp", "kubernetes", "terraform", "dns", "firewall", "infrastructure"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gcpextension"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
