"""Data Abstraction Layer (DAL) for table metadata.

Metadata sources here fetch raw column and index rows from a database and
hand them to the ``table_schema`` pipeline.
"""
