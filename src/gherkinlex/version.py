from importlib.metadata import PackageNotFoundError, version

try:
    version = version("GherkinLex")
except PackageNotFoundError:
    version = "0.0.0"
