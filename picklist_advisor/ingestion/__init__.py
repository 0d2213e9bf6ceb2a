"""
Ingestion layer — loading host-provided analysis input.

Submodules:
  snapshot — JSON event snapshot (pool + pick list) loader and validator
"""
