# --- HEADER-LEVEL FILTERS: phrase variants per module category -------------
# Every language variant is its own entry; nothing is fuzzy-matched.
HEADERS = {
    "peopleAlsoAsk": [
        "People also ask",                  # question-and-answer accordion
        "Autres questions posées",          # fr
    ],
    "popularProducts": [
        "Popular products",                 # shopping carousel
        "Produits populaires",              # fr
    ],
    "inStoresNearby": [
        "In stores nearby",                 # local inventory panel
        "En magasin à proximité",           # fr
        "En magasins à proximité",          # fr (plural)
    ],
    "videos": [
        "Videos",                           # video carousel
        "Vidéos",                           # fr
    ],
    "relatedProductsServices": [
        "Find related products & services", # sponsored refinement block
        "Find related products and services",
        "Trouver des produits et services associés",  # fr
    ],
    "peopleAlsoSearchFor": [
        "People also search for",           # related-query grid
        "People also searched for",
        "Related searches",                 # bottom-of-page variant
        "Searches related to",
        "Recherches associées",             # fr
        "Autres recherches associées",      # fr
        "Recherches liées à",               # fr
    ],
}

# Categories searched inside the results zone only, climb bounded by that zone
RESULTS_CATEGORIES = (
    "peopleAlsoAsk",
    "popularProducts",
    "inStoresNearby",
    "videos",
    "relatedProductsServices",
)

# Categories known to appear near the page end: tail zones first, unbounded climb
TAIL_CATEGORIES = (
    "peopleAlsoSearchFor",
)
