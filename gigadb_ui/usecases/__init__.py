"""Use-case layer for the GigaDB browser.

Each module wraps one remote operation behind ``UserPort`` and converts
adapter failures into ``UseCaseError`` codes, so controllers never see
transport exceptions.
"""
