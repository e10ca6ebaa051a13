from importlib import metadata

try:
    __version__ = metadata.version("loanfit")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    from loanfit import __version__
