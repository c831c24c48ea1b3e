"""Database layer backing the SQL record service."""
