"""Pydantic domain models: SelectionSet (mutable) and frozen result models."""
