"""Use-case layer for the posts CRUD workflows.

Each module wraps one ``PostPort`` call and converts adapter failures into
``UseCaseError`` without touching view-model state.
"""
