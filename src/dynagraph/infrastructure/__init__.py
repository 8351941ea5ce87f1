"""Infrastructure layer: store adapters and import sources.

This layer depends on stdlib and third-party libs (boto3, botocore).
It must never import from domain, services, commands, or output.
Items cross this boundary as plain ``dict[str, str]`` mappings.
"""
