"""FPL return consistency metrics: load, filter, sort, paginate, score and export."""

__version__ = "0.1.0"
