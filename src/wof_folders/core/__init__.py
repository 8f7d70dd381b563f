"""
Orchestration layer: build context, progress state, exceptions and the
pipeline that ties the loader to the hierarchy engine.
"""
