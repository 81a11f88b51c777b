# --- ID-LEVEL FILTERS: exact IDs ------------------------------------------
# Results root candidates, first present wins
RESULTS_ROOT_ID = (
    "search",           # modern results wrapper
    "center_col",       # older center column
    "main",             # outer main container
)

# Footer-adjacent zones, searched in this order before the results root
TAIL_ZONE_ID = (
    "botstuff",         # bottom-of-results area
    "bres",             # bottom related searches
    "foot",             # pagination / footer block
)

# Observer root, falls back to <body>
OBSERVER_ROOT_ID = "search"

# Containers that must never carry the marker
PROTECTED_ID = {
    "search",           # primary results container
    "main",             # main content container
    "center_col",       # center column
}

# Canonical organic results list; nothing containing it is ever hidden
ORGANIC_LIST_ID = "rso"

# Promotional containers whose links never count as the first organic anchor
PROMO_CONTAINER_ID = {
    "tads",             # top ads
    "tadsb",            # top ads (alternate)
    "bottomads",        # bottom ads
}

# Hidden by the overlay stylesheet alone (conservative, layout-dependent)
OVERLAY_HIDE_ID = (
    "hdtb",             # top nav / filter chips
    "appbar",           # result-count bar
    "rhs",              # right rail
    "rhscol",           # right rail column
    "tads",             # ads
    "tadsb",
    "bottomads",
)

# Ids owned by the firewall itself
STYLE_ID = "gcf-style"
TOGGLE_ID = "gcf-toggle"
