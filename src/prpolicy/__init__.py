"""prpolicy — evaluate pull-request policy predicates."""

__version__ = "0.1.0"
