"""Pydantic schemas for payloads, results and the response envelope."""
