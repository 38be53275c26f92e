"""docdata — reshape parsed documentation records into JSON data assets."""

__version__ = "0.1.0"
