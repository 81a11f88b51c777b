# --- TAG-LEVEL FILTERS ----------------------------------------------------
# Generic text-bearing tags that may carry a module header
HEADER_TAG = (
    "span",         # inline text container
    "div",          # block container
    "h2", "h3",     # heading levels 2-3
)

# Tags that are never hidden, whatever matches inside them
NEVER_HIDE_TAG = {
    "html",         # document root
    "body",         # whole page
}

# Fallback tag for the results root when no id matches
RESULTS_ROOT_TAG = "main"

# Link tag searched by the structural position rule
LINK_TAG = "a"

# Content that is never part of the visible text
INVISIBLE_TAG = {
    "script",       # JS code
    "style",        # CSS rules
    "noscript",     # JS fallbacks
    "template",     # inert templates
}
