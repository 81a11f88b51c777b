# --- ATTRIBUTE-LEVEL FILTERS (name based) -----------------------------------
# Attributes whose presence marks a structural component boundary
BOUNDARY_ATTR = (
    "jscontroller",     # component controller wrapper
    "data-hveid",       # tracked result/module wrapper
)

# Attributes whose presence marks a promotional container
PROMO_ATTR = {
    "data-text-ad",     # text ad block
}

# The single attribute the engine writes to record "currently hidden"
MARKER_ATTR = "data-gcf-hidden"
MARKER_VALUE = "1"
