"""dynagraph: directed graph storage on DynamoDB tables."""

__version__ = "0.1.0"
