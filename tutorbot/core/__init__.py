"""Domain core: prompt composition, context aggregation and ingestion helpers."""
