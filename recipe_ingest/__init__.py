"""
Recipe text ingestion: parse delimited cookbook text into recipe records
and validate its structure before import.
"""
