"""Fixed prompt for music credits extraction.

Schema version 3: artist, releases, rights and clarification/parsing notes,
with explicit enumerations and anti-inference rules.
"""

SCHEMA_VERSION = "3"

TEXT_CONTENT_PREFIX = "Here is the music credits/tracklist content:\n\n"

_JSON_SCHEMA = """{
  "artist": {
    "name": "artist name if found" or null,
    "email": "email if found" or null
  },
  "releases": [
    {
      "title": "release title if mentioned" or "Untitled Release",
      "type": "EP" | "Single" | "Album" | "UNKNOWN",
      "year": "YYYY" or null,
      "tracks": ["track 1", "track 2"] or []
    }
  ],
  "rights": {
    "masterOwnership": "OWNS" | "DOES_NOT_OWN" | "PARTIAL" | "CONFLICTED" | "UNKNOWN",
    "masterOwnershipNotes": "explanation if conflicted or uncertain",
    "composition": "SOLE" | "CO_WRITTEN" | "CONFLICTED" | "UNKNOWN",
    "compositionNotes": "explanation if conflicted or uncertain"
  },
  "clarificationNeeded": [
    "specific question about ambiguous point"
  ],
  "parsingErrors": [
    "description of what failed to parse"
  ]
}"""

EXTRACTION_PROMPT = """You are a careful rights administrator extracting music metadata.

CRITICAL RULES:
1. NEVER infer or guess. Only extract what is explicitly stated.
2. If information is ambiguous or conflicting, mark it as CONFLICTED.
3. If information is missing, return null - do NOT fill gaps.
4. Biographical context (where someone lives, when they moved) is NOT release information.
5. Preserve uncertainty. "maybe" or "might" in source = UNCERTAIN in output.
6. Release years must be explicitly stated as release dates, not biographical dates.
7. Multiple releases = separate records in the releases array.

Return ONLY valid JSON (no markdown, no explanation):

""" + _JSON_SCHEMA + """

Examples of CONFLICTED:
- Text says "I own the masters" but also "produced at X Studio under contract" → CONFLICTED
- Text says "I wrote everything" but also "co-produced with Y" → check if co-production = co-writing

Examples of what NOT to extract as release year:
- "living in Brussels since 2019" → NOT a release year
- "started making music in 2020" → NOT a release year
- "Released Summer EP in 2024" → YES, this is a release year

If track extraction fails or produces garbage, add to parsingErrors. Do not return broken data."""
