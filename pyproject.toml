[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quantumn"
version = "0.1.0"
description = "Prompt routing, keyword retrieval, file tools and a local model server supervisor for a coding assistant"
requires-python = ">=3.10"
dependencies = []
keywords = ["ai", "coding", "assistant", "llm", "router", "rag", "llama.cpp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quantumn"]

[tool.pytest.ini_options]
addopts = "-ra"
