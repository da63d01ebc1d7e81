"""Global configuration: business constants and field names."""

# Overage applied to the raw wall volume before it is split into materials
WASTE_MARGIN = 1.3

# Volume share of cement (m3) represented by one bag
CEMENT_BAG_VOLUME = 1.25

# Decimal places shown for every derived quantity
DISPLAY_DECIMALS = 2

# Value reported for a room whose geometry cannot be parsed
ZERO_QUANTITY = "0"

# Room fields that must parse as numbers (metres)
DIMENSION_FIELDS = ("length", "width", "height", "thickness")

# All editable room fields, in form order
ROOM_FIELDS = ("name",) + DIMENSION_FIELDS

# Derived fields appended to each room result
RESULT_FIELDS = ("wall_volume", "cement_quantity", "sand_quantity")
