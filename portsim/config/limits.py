"""
Constants of the encoded cargo line format.

One cargo per line, fields separated by FIELD_SEPARATOR:

    Container:<id>:<destination>:<ContainerType>
    BulkCargo:<id>:<destination>:<BulkCargoType>:<tonnage>
"""

from __future__ import annotations

FIELD_SEPARATOR = ":"

# Field counts per variant, type tag included
CONTAINER_FIELD_COUNT = 4
BULK_CARGO_FIELD_COUNT = 5

# Integer fields (id, tonnage) are signed 32-bit on the wire
MIN_INT_FIELD = -(2**31)
MAX_INT_FIELD = 2**31 - 1
