"""Static content tables for plan generation.

Everything here is a tuple so lookups keep a fixed order and nothing can be
mutated between calls.  Tone and location tables are scanned first-match-wins,
so their order is part of the output contract.
"""

from __future__ import annotations

DEFAULT_IDEA = "A lone archivist uncovers a conspiracy encoded in vintage film reels."

# Substituted for an empty idea when hashing only
EMPTY_IDEA_SEED_TEXT = "default"

PROTAGONIST_NAMES = (
    "Alex",
    "Jordan",
    "Riley",
    "Taylor",
    "Morgan",
    "Avery",
    "Quinn",
    "Sloane",
    "Rowan",
    "Phoenix",
    "Harper",
    "Elliot",
)

# Disjoint from PROTAGONIST_NAMES
SUPPORTING_NAMES = (
    "Casey",
    "Dakota",
    "Hayden",
    "Emerson",
    "Remy",
    "Skyler",
    "Reese",
    "Kai",
    "Noah",
    "Sage",
    "Peyton",
    "Jules",
)

DEFAULT_TONE = "Cinematic, grounded, emotionally resonant"

# (keyword, tone) — first keyword found in the idea wins
GENRE_TONES = (
    ("romance",   "Tender, luminous, emotionally driven"),
    ("love",      "Warm, intimate, hopeful"),
    ("adventure", "Alive, kinetic, heart-pounding"),
    ("mystery",   "Atmospheric, shadowy, tense"),
    ("detective", "Noir-inspired, moody, deliberate"),
    ("sci",       "Sleek, visionary, futuristic"),
    ("space",     "Expansive, awe-struck, ethereal"),
    ("cyber",     "Neon-lit, high-contrast, edgy"),
    ("dystopia",  "Gritty, desaturated, urgent"),
    ("fantasy",   "Mythic, vibrant, enchanting"),
    ("magic",     "Glowing, whimsical, surreal"),
    ("horror",    "Foreboding, stark, unsettling"),
    ("ghost",     "Haunting, mist-laden, melancholic"),
    ("thriller",  "High-stakes, precise, tense"),
    ("comedy",    "Playful, lively, colorful"),
    ("heist",     "Slick, methodical, urbane"),
    ("sports",    "Dynamic, triumphant, high-energy"),
)

VISUAL_MOODS = (
    "rain-soaked city streets reflecting neon glows",
    "sun-drenched vistas with cinematic lens flares",
    "moody interiors with chiaroscuro lighting",
    "wind-swept coastal cliffs under dramatic skies",
    "lush forests painted with volumetric light",
    "brutalist architecture softened by ambient haze",
    "futuristic skylines wrapped in low-lying clouds",
    "deserted alleyways carved by shafts of light",
    "art deco interiors with polished brass highlights",
    "misty mountains framed by golden hour light",
    "retro diners with saturated color palettes",
    "industrial rooftops glowing in pre-dawn blue",
)

# (trigger keywords, location, time of day)
LOCATION_PRESETS = (
    (("city", "urban", "street", "neon", "metropolis"), "Downtown rooftop overlooking the city", "Night"),
    (("forest", "woods", "nature", "grove"),            "Ancient forest clearing",               "Dusk"),
    (("desert", "sand", "arid"),                        "Vast desert ridge",                     "Twilight"),
    (("ocean", "sea", "coast", "beach"),                "Clifftop above the tide",               "Golden Hour"),
    (("space", "galaxy", "planet"),                     "Observation deck aboard an orbital station", "Starlit"),
    (("castle", "kingdom", "throne"),                   "Torch-lit great hall",                  "Night"),
    (("lab", "science", "tech"),                        "High-security research lab",            "Late Night"),
    (("village", "town", "market"),                     "Twinkling market square",               "Evening"),
)

FALLBACK_LOCATIONS = (
    ("Converted warehouse staging area",     "Midnight"),
    ("Glass-walled penthouse command center", "Blue Hour"),
    ("Rain-specked tram station",            "Dawn"),
)

# (title, logline lead-in, beat verbs)
STAGES = (
    ("Spark",      "Inciting moment", ("Introduce", "Reveal", "Provoke")),
    ("Escalation", "Rising conflict", ("Collide", "Challenge", "Complicate")),
    ("Resolution", "Climactic turn",  ("Confront", "Transform", "Resolve")),
)

FALLBACK_BEAT_WORDS = ("the plan", "the turning point", "the silence")

NARRATOR_ROLES = ("Director", "Cinematographer", "Narrator")

STOP_WORDS = frozenset(
    {"with", "that", "from", "into", "about", "after", "before", "under", "over", "between"}
)

MAX_KEYWORDS = 8

# Trimmed from both ends of an idea: ASCII whitespace, Unicode space
# separators, line/paragraph separators and the BOM.  \x1c-\x1f and \x85 stay.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
