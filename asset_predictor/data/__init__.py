"""
Price data ingestion and validation module.

Handles parsing of line-delimited price text and manual entries into
canonical price records, and the minimum-data contract checks.
"""
