"""Reference table loading."""

from savings_gen.references.loader import ReferenceLoader, ReferenceTables
from savings_gen.references.sample import build_sample_references

__all__ = ["ReferenceLoader", "ReferenceTables", "build_sample_references"]
