"""Value types and wire records.

- notation: ``Notation`` enum and ``NotationSymbols``
- values: ``LatLong``, ``Precision``, ``GeoCoordinate``, ``PreciseLatLong``
- payloads: pydantic records for dict serialisation
"""
