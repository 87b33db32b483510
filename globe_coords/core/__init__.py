"""Core infrastructure shared by every component.

- config: ``CoordinateOptions`` and environment loading
- constants: globe identifiers, default glyphs, value bounds
- exceptions: ``GeoCoordinateError`` hierarchy
"""
