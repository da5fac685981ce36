"""Generate typed GopherJS bindings from live JavaScript object graphs."""

__version__ = "0.1.0"
